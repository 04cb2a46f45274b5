"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from gm_tracker.configs.base import BaseSettings
from gm_tracker.configs.assistant import AssistantSettings
from gm_tracker.configs.local_store import LocalStoreSettings
from gm_tracker.configs.remote_backend import RemoteBackendSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    remote: RemoteBackendSettings = Field(default_factory=RemoteBackendSettings)
    local_store: LocalStoreSettings = Field(default_factory=LocalStoreSettings)
    assistant: AssistantSettings = Field(default_factory=AssistantSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from gm_tracker.configs import get_settings
        settings = get_settings()
    """
    return Settings()
