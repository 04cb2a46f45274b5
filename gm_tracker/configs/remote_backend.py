"""
Remote backend configuration settings.

Endpoint URL and access key for the hosted relational store and
authentication provider. Their joint presence switches the data
gateway into remote mode.

Dependencies: pydantic, pydantic_settings
System role: Remote backend connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from gm_tracker.configs.base import BaseSettings


class RemoteBackendSettings(BaseSettings):
    """Hosted backend (REST + auth) configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SUPABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="", description="Remote backend endpoint URL")
    anon_key: str = Field(default="", description="Remote backend access key")
    timeout: float = Field(default=20.0, description="HTTP request timeout in seconds")

    @property
    def is_configured(self) -> bool:
        """
        Check whether both URL and key are present.

        Returns:
            bool: True when remote mode should be used
        """
        return bool(self.url.strip() and self.anon_key.strip())

    @property
    def base_url(self) -> str:
        """Endpoint URL without trailing slash."""
        return self.url.strip().rstrip("/")
