"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from gm_tracker.boundary.db.CRUD import local_blob_crud

    projects = await local_blob_crud.read_json(db, "pt_gm_projects")
"""

from gm_tracker.boundary.db.CRUD.base_crud import BaseCRUD
from gm_tracker.boundary.db.CRUD.local_blob_crud import LocalBlobCRUD, local_blob_crud

__all__ = [
    "BaseCRUD",
    "LocalBlobCRUD",
    "local_blob_crud",
]
