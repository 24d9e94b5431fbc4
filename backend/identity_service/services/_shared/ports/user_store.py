from __future__ import annotations

import threading
from typing import Protocol
from uuid import uuid4

from identity_service.models.user import User


def new_user_id() -> str:
    """Return a fresh opaque user identifier."""
    return str(uuid4())


class UserStore(Protocol):
    """
    Persistence contract consumed by the authentication service.

    Implementations own connection lifetime and transactions; each method is
    one complete store call.
    """

    def add_user(self, user: User) -> User | None:
        """Assign an id, persist ``user`` and return it; ``None`` if the write is rejected."""
        ...

    def get_user_by_credentials(self, email: str, password: str) -> User | None:
        """Return the user matching ``email`` whose hash verifies ``password``, else ``None``."""
        ...


class InMemoryUserStore(UserStore):
    """Dict-backed store for unit tests and single-process demos.

    Emails are unique, mirroring ``uq_users_email`` on the SQL table.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[str, User] = {}
        self._id_by_email: dict[str, str] = {}

    def add_user(self, user: User) -> User | None:
        with self._lock:
            if user.email in self._id_by_email:
                return None
            user.id = new_user_id()
            self._by_id[user.id] = user
            self._id_by_email[user.email] = user.id
            return user

    def get_user_by_credentials(self, email: str, password: str) -> User | None:
        with self._lock:
            user_id = self._id_by_email.get(email)
            user = self._by_id.get(user_id) if user_id else None
        if user is None or not user.verify_password(password):
            return None
        return user

    def __len__(self) -> int:
        return len(self._by_id)
