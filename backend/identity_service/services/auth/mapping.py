"""
Declarative mapping profiles between boundary DTOs and the ``User`` entity.

Each profile is an ordered tuple of :class:`FieldRule`; :func:`project`
applies a profile to any source object and returns the target keyword
arguments. Mapping never validates (that happened upstream) and never
touches ``id`` on the way in, nor ``success``/``token`` on the way out.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from identity_service.models.enums import Gender
from identity_service.models.user import User
from identity_service.services._shared.errors import InconsistentRecordError
from identity_service.services.auth.dto import AuthenticationOut, RegisterIn


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True, slots=True)
class FieldRule:
    """
    Copy ``source`` attribute into ``target`` key, optionally converting it.

    :param source: Attribute read from the source object.
    :param target: Keyword produced for the target (defaults to ``source``).
    :param convert: Pure, total conversion applied to the value.
    """

    source: str
    target: str | None = None
    convert: Callable[[Any], Any] = _identity

    @property
    def destination(self) -> str:
        return self.target or self.source


def project(source: Any, rules: tuple[FieldRule, ...]) -> dict[str, Any]:
    """Apply ``rules`` in order and return the projected keyword arguments."""
    return {rule.destination: rule.convert(getattr(source, rule.source)) for rule in rules}


def _gender_label(gender: Gender) -> str:
    return gender.value


def _gender_member(label: str) -> Gender:
    try:
        return Gender(label)
    except ValueError:
        raise InconsistentRecordError("User", "gender", label) from None


# ------------------------------ Profiles ------------------------------------ #

REGISTER_TO_USER: tuple[FieldRule, ...] = (
    FieldRule("email"),
    FieldRule("display_name"),
    FieldRule("password"),  # the entity setter stores a salted hash
    FieldRule("gender", convert=_gender_label),
)

USER_TO_RESPONSE: tuple[FieldRule, ...] = (
    FieldRule("id"),
    FieldRule("email"),
    FieldRule("display_name"),
    FieldRule("gender", convert=_gender_member),
)


def to_user(dto: RegisterIn) -> User:
    """Build a candidate :class:`User` (``id`` unset) from a registration DTO."""
    return User(**project(dto, REGISTER_TO_USER))


def to_response(user: User) -> AuthenticationOut:
    """Project a stored :class:`User` onto an unsuccessful, token-less response.

    :raises InconsistentRecordError: If the stored gender label is not a
        :class:`Gender` member.
    """
    return AuthenticationOut(**project(user, USER_TO_RESPONSE))
