"""
School Records API: Shared Model Columns
==========================================

What:  Mixin carrying the columns every entity table has.
Why:   School, Class and Student share the same identity, timestamp and
       soft-delete columns; declaring them once keeps the three tables
       identical in that respect.

Column Rationale:
    - id: Auto-incrementing integer primary key, generated by the store
    - created_at / updated_at: UTC, set by the ORM on insert/update
    - deleted_at: NULL while the row is active; set by a delete request.
      Rows with a non-NULL deleted_at stay in the table but are invisible
      to every read and update (see CRUDRepository.active_filter).
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, text
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityMixin:
    """Identity, timestamps and soft-delete marker."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Indexed: every query filters on deleted_at IS NULL
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        index=True,
    )

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, active={self.is_active})>"
