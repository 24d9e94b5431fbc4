"""Reusable SQLAlchemy mixins shared by models (typed 2.0)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

# Length of a canonical UUID string
OPAQUE_ID_LENGTH = 36


class CreatedAtMixin:
    """Provide a ``created_at`` timestamp filled by the database on insert."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class OpaqueIdMixin:
    """Expose an opaque string primary key named ``id``.

    The database never generates it: the store assigns a UUID4 string right
    before the insert, and nothing reassigns it afterwards.
    """

    id: Mapped[str] = mapped_column(String(OPAQUE_ID_LENGTH), primary_key=True)


class ReprMixin:
    """Provide a concise ``__repr__`` including the class name and id."""

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        key = getattr(self, "id", None)
        return f"<{cls} id={key}>"
