"""
Local blob ORM model.

One row per storage key holding a JSON document: the projects,
customers and employees collections and the current session.

Dependencies: sqlalchemy, gm_tracker.boundary.db.base
System role: Persistence for the local fallback store
"""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from gm_tracker.boundary.db.base import Base, TimestampMixin


class LocalBlobModel(Base, TimestampMixin):
    """
    Key-to-JSON-blob row.

    Every read deserializes the whole blob and every write replaces it.

    Attributes:
        key: Storage key (e.g. pt_gm_projects)
        value: JSON list or object
    """

    __tablename__ = "local_storage"

    key: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        doc="Storage key",
    )

    value: Mapped[Any] = mapped_column(
        JSON,
        nullable=False,
        doc="Collection or session document",
    )

    def __repr__(self) -> str:
        return f"<LocalBlobModel(key={self.key})>"
