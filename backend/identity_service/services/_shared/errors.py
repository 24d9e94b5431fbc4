"""
Service-layer exceptions.

These exceptions are **framework-agnostic** and never import Flask or HTTP
concerns. Business outcomes (unknown credentials, rejected writes) are absent
results, not exceptions; the types here signal faults that must reach the
boundary's generic handler.
"""

from __future__ import annotations

from dataclasses import dataclass


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer renders them as a generic server error.
    """

    pass


@dataclass(slots=True)
class InconsistentRecordError(ServiceError):
    """
    Raised when a persisted value cannot be mapped back to its domain type.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param field: Offending attribute.
    :type field: str
    :param value: Stored value as read.
    :type value: object
    """

    entity: str
    field: str
    value: object

    def __str__(self) -> str:
        return f"{self.entity}.{self.field} holds an unmappable value: {self.value!r}"
