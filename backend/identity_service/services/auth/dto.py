# identity_service/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

from identity_service.models.enums import Gender

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email as submitted.
    :type email: str
    :param password: Raw password (to be verified against the stored hash).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for registration.

    :param email: Login email.
    :type email: str
    :param password: Raw password (the model setter hashes it).
    :type password: str
    :param display_name: Public name, 1..50 characters.
    :type display_name: str
    :param gender: Member of the closed gender enumeration.
    :type gender: Gender
    """

    email: str
    password: str
    display_name: str
    gender: Gender


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthenticationOut:
    """
    Output DTO for both use cases.

    ``success`` and ``token`` are never derived from the stored user: mapping
    leaves them at their failure defaults and the service sets them after a
    store call succeeds.
    """

    id: str | None = None
    email: str | None = None
    display_name: str | None = None
    gender: Gender | None = None
    token: str | None = None
    success: bool = False

    @classmethod
    def failure(cls) -> AuthenticationOut:
        """Return the all-null, ``success=False`` response."""
        return cls()
