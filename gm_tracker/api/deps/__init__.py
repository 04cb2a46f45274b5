"""FastAPI dependency providers."""

from gm_tracker.api.deps.dependencies import (
    get_assistant,
    get_dashboard_service,
    get_data_store,
    get_project_service,
    get_service_cache,
    get_team_service,
)

__all__ = [
    "get_assistant",
    "get_dashboard_service",
    "get_data_store",
    "get_project_service",
    "get_service_cache",
    "get_team_service",
]
