"""User repository for persistence and credential lookup."""

from __future__ import annotations

from identity_service.models.user import User
from identity_service.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    It NEVER issues tokens; credential checks delegate to the model's
    hash verification.
    """

    model = User

    def _filterable_fields(self):
        """Whitelist fields safe for equality filters."""
        return {
            "id": User.id,
            "email": User.email,
        }

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by exact email.

        :param email: Email address as submitted.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        return self.find_one(email=email)

    # ---------------------------- Credentials ----------------------------

    def authenticate(self, email: str, password: str) -> User | None:
        """Return the user whose email matches and whose hash verifies ``password``.

        :param email: Email address to look up.
        :type email: str
        :param password: Raw password to verify against the stored hash.
        :type password: str
        :returns: Authenticated user or ``None`` when credentials fail.
        :rtype: User | None
        """
        user = self.get_by_email(email)
        if user is None or not user.verify_password(password):
            return None
        return user
