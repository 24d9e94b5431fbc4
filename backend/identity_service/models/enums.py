"""Closed enumerations shared by the boundary and the persisted model."""

from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Gender options accepted at registration.

    Values double as the labels persisted in ``users.gender``.
    """

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        """Return the persisted labels in declaration order."""
        return tuple(member.value for member in cls)
