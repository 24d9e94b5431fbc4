"""User model definition for the storefront identity service."""

from __future__ import annotations

from typing import Any

from sqlalchemy import CheckConstraint, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, validates
from werkzeug.security import check_password_hash, generate_password_hash

from identity_service.core.extensions import db

from .base import CreatedAtMixin, OpaqueIdMixin, ReprMixin
from .enums import Gender

EMAIL_MAX_LENGTH = 254
DISPLAY_NAME_MAX_LENGTH = 50


def _gender_check() -> str:
    labels = ", ".join(f"'{label}'" for label in Gender.labels())
    return f"gender IN ({labels})"


class User(OpaqueIdMixin, ReprMixin, CreatedAtMixin, db.Model):
    """
    Registered storefront customer.

    Fields
    ------
    id : str
        Opaque identifier assigned by the store at creation.
    email : str
        Login email. Unique across users.
    display_name : str
        Public name shown by the storefront (1..50 characters).
    gender : str
        Label of a :class:`~identity_service.models.enums.Gender` member.
    password_hash : str
        Salted one-way hash (write-only setter via ``password``).
    created_at : datetime
        Creation timestamp (from mixin).
    """

    __tablename__ = "users"

    # Columns
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    display_name: Mapped[str] = mapped_column(String(DISPLAY_NAME_MAX_LENGTH), nullable=False)
    gender: Mapped[str] = mapped_column(String(16), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(254), nullable=False)

    # Constraints (the unique constraint also backs email lookups)
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        CheckConstraint(_gender_check(), name="gender_label"),
    )

    # -------------------- Password API --------------------
    @property
    def password(self) -> Any:  # pragma: no cover - explicit write-only contract
        """
        Disallow reading passwords.

        :raises AttributeError: Always, to ensure password is write-only.
        """
        raise AttributeError("Password is write-only.")

    @password.setter
    def password(self, raw: str) -> None:
        """
        Hash and set the password.

        :param raw: Plain text password to hash.
        :type raw: str
        """
        if not isinstance(raw, str) or not raw:
            raise ValueError("Password must be a non-empty string.")
        self.password_hash = generate_password_hash(raw)

    def verify_password(self, raw: str) -> bool:
        """
        Verify a password against the stored hash.

        :param raw: Plain text password candidate.
        :type raw: str
        :returns: ``True`` if it matches; otherwise ``False``.
        :rtype: bool
        """
        if not self.password_hash:
            return False
        return bool(check_password_hash(self.password_hash, raw))

    # -------------------- Validators --------------------
    @validates("gender")
    def _validate_gender(self, key: str, value: str | Gender) -> str:
        """
        Accept a :class:`Gender` member or one of its labels and store the label.

        :raises ValueError: If the value is not a known label.
        """
        if isinstance(value, Gender):
            return value.value
        if value not in Gender.labels():
            raise ValueError(f"Unknown gender label: {value!r}")
        return value

    @validates("email")
    def _validate_email(self, key: str, value: str) -> str:
        """Reject empty emails; format checks happen at the API boundary."""
        if not value or not isinstance(value, str):
            raise ValueError("Email is required.")
        return value
