"""
Dependency injection container.

Factory functions for FastAPI dependencies. The data store is chosen
once per process and shared by every request.

Dependencies: gm_tracker.configs, gm_tracker.application, gm_tracker.boundary
System role: DI container for service injection
"""

import logging

from fastapi import Depends

from gm_tracker.application.services import DashboardService, ProjectService, TeamService
from gm_tracker.boundary.store import DataStore, create_data_store, ensure_seeded
from gm_tracker.configs import Settings, get_settings
from gm_tracker.core.assistant import PortfolioAssistant

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._store: DataStore | None = None
        self._assistant: PortfolioAssistant | None = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def store(self) -> DataStore:
        """Get cached data store."""
        if self._store is None:
            self._store = create_data_store(self.settings)
        return self._store

    @property
    def assistant(self) -> PortfolioAssistant:
        """Get cached portfolio assistant."""
        if self._assistant is None:
            self._assistant = PortfolioAssistant.from_settings(self.settings.assistant)
        return self._assistant

    async def initialize(self) -> None:
        """Open the store and seed the fallback backend on first run."""
        store = self.store
        await store.initialize()
        seeded = await ensure_seeded(store)
        logger.info(
            "Data store ready",
            extra={"backend": store.backend_name, "seeded": seeded},
        )

    async def aclose(self) -> None:
        """Release the store and clear all cached instances."""
        if self._store is not None:
            await self._store.aclose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._store = None
        self._assistant = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_data_store(cache: ServiceCache = Depends(get_service_cache)) -> DataStore:
    """Get the active data store."""
    return cache.store


def get_assistant(cache: ServiceCache = Depends(get_service_cache)) -> PortfolioAssistant:
    """Get the portfolio assistant."""
    return cache.assistant


def get_project_service(store: DataStore = Depends(get_data_store)) -> ProjectService:
    """
    Get project service instance.

    Args:
        store: Active data store (injected via Depends)

    Returns:
        ProjectService: Project service instance
    """
    return ProjectService(store=store)


def get_team_service(store: DataStore = Depends(get_data_store)) -> TeamService:
    """Get team service instance."""
    return TeamService(store=store)


def get_dashboard_service(
    store: DataStore = Depends(get_data_store),
    assistant: PortfolioAssistant = Depends(get_assistant),
) -> DashboardService:
    """
    Get dashboard service instance.

    Args:
        store: Active data store (injected via Depends)
        assistant: Portfolio assistant (injected via Depends)

    Returns:
        DashboardService: Dashboard service instance
    """
    return DashboardService(store=store, assistant=assistant)
