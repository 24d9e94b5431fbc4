"""Repository package exposing persistence-layer access for the user aggregate."""

from __future__ import annotations

from identity_service.repositories.base import BaseRepository
from identity_service.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
]
