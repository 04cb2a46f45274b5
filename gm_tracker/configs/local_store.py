"""
Local fallback store configuration settings.

Manages the SQLite database backing the key-to-JSON-blob fallback store
and the key names of its four collections.

Dependencies: pydantic, pydantic_settings
System role: Fallback persistence configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from gm_tracker.configs.base import BaseSettings


class LocalStoreSettings(BaseSettings):
    """Local key-value store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOCAL_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///./gm_tracker.db",
        description="SQLAlchemy async URL of the fallback database",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
    key_prefix: str = Field(default="pt_gm", description="Prefix for storage keys")

    @property
    def projects_key(self) -> str:
        return f"{self.key_prefix}_projects"

    @property
    def customers_key(self) -> str:
        return f"{self.key_prefix}_customers"

    @property
    def employees_key(self) -> str:
        return f"{self.key_prefix}_employees"

    @property
    def session_key(self) -> str:
        return f"{self.key_prefix}_session"
