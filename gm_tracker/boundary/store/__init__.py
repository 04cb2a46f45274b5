"""
Storage gateway: one CRUD and auth contract over the remote backend or the local fallback.

Usage:
    from gm_tracker.boundary.store import create_data_store, ensure_seeded

    store = create_data_store()
    await store.initialize()
    await ensure_seeded(store)
    projects = (await store.fetch_projects()).unwrap_or([])
"""

from gm_tracker.boundary.store.activity_logger import ActivityAction, ActivityLogger
from gm_tracker.boundary.store.base import DataStore, utc_now_iso
from gm_tracker.boundary.store.local_store import LocalStore
from gm_tracker.boundary.store.remote_store import RemoteStore
from gm_tracker.boundary.store.seed import ensure_seeded
from gm_tracker.boundary.store.store_factory import create_data_store

__all__ = [
    "ActivityAction",
    "ActivityLogger",
    "DataStore",
    "LocalStore",
    "RemoteStore",
    "create_data_store",
    "ensure_seeded",
    "utc_now_iso",
]
