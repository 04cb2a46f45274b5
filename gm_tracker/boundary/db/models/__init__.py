"""ORM models."""

from gm_tracker.boundary.db.models.local_blob_model import LocalBlobModel

__all__ = ["LocalBlobModel"]
