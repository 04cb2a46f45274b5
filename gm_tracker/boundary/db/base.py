"""
SQLAlchemy declarative base and shared column mixins.

Dependencies: sqlalchemy
System role: ORM registry for the local fallback database
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base; models must subclass it to be created at startup."""


class TimestampMixin:
    """
    Row-level bookkeeping timestamps (UTC).

    These track when a storage row was written and are independent of
    the ``updatedAt`` field inside the JSON documents.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )
