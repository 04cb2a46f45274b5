"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), create_all_tables(): Connection management
  - LocalBlobModel: Key-to-JSON-blob row
  - local_blob_crud: CRUD singleton

Dependencies: sqlalchemy, gm_tracker.configs
System role: Database adapter providing persistent storage for the local fallback store
"""

from gm_tracker.boundary.db.base import Base, TimestampMixin
from gm_tracker.boundary.db.connection import (
    create_all_tables,
    engine_from_settings,
    get_async_engine,
    get_async_session_factory,
)
from gm_tracker.boundary.db.models.local_blob_model import LocalBlobModel
from gm_tracker.boundary.db.CRUD import BaseCRUD, LocalBlobCRUD, local_blob_crud

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Connection
    "create_all_tables",
    "engine_from_settings",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "LocalBlobModel",
    # CRUD
    "BaseCRUD",
    "LocalBlobCRUD",
    "local_blob_crud",
]
