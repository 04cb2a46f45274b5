"""
AI assistant configuration settings.

Settings for the Gemini model used to summarize the portfolio and
draft project status emails.

Dependencies: pydantic_settings
System role: Generative text service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssistantSettings(BaseSettings):
    """Gemini configuration for portfolio analysis and reports."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Google Generative AI API key")
    model: str = Field(default="gemini-2.5-flash", description="Gemini model ID")
    temperature: float = Field(default=0.2, description="Sampling temperature")

    @property
    def is_configured(self) -> bool:
        """True when an API key is available."""
        return bool(self.api_key and self.api_key.strip())
