"""
Data store factory for selecting between the remote backend and the local fallback.

The choice depends only on whether the remote URL and key are both set.
It is made once by the composition root; the returned store is then
injected wherever data access is needed.

Dependencies: gm_tracker.boundary, gm_tracker.configs
System role: Data store instantiation and selection
"""

import logging

from gm_tracker.boundary.db.connection import engine_from_settings, get_async_session_factory
from gm_tracker.boundary.remote.rest_client import RemoteBackendClient
from gm_tracker.boundary.store.base import DataStore
from gm_tracker.boundary.store.local_store import LocalStore
from gm_tracker.boundary.store.remote_store import RemoteStore
from gm_tracker.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def create_data_store(settings: Settings | None = None) -> DataStore:
    """
    Factory function to get the data store based on configuration.

    Args:
        settings: Application settings (defaults to the cached singleton)

    Returns:
        RemoteStore or LocalStore: Configured data store instance
    """
    settings = settings or get_settings()

    if settings.remote.is_configured:
        logger.info(f"{__name__}:create_data_store - Creating remote store")
        return RemoteStore(RemoteBackendClient.from_settings(settings.remote))

    logger.info(f"{__name__}:create_data_store - Creating local store (fallback mode)")
    engine = engine_from_settings(settings.local_store)
    return LocalStore(
        session_factory=get_async_session_factory(engine),
        settings=settings.local_store,
        engine=engine,
    )
