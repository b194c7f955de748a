"""
Feedcast configuration.

This module provides settings for the renderers and the HTTP controllers
loaded from environment variables.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent / ".env"


class FeedcastSettings(BaseSettings):
    """
    Feedcast configuration from environment variables.

    All settings are prefixed with FEEDCAST_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDCAST_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # RSS 2.0 controller
    rss_enabled: bool = True
    rss_path: str = Field(default="/feed", min_length=1)

    # JSON Feed controller, served at {jsonfeed_root_path}{jsonfeed_path}
    jsonfeed_enabled: bool = True
    jsonfeed_root_path: str = Field(default="/feeds", min_length=1)
    jsonfeed_path: str = Field(default="/json", min_length=1)

    # Raise FeedRenderError on the first failed element instead of logging it
    render_strict: bool = False

    log_level: str = "INFO"
    log_json: bool = False


# Global instance
settings = FeedcastSettings()


def get_settings() -> FeedcastSettings:
    """Return the process-wide settings (FastAPI dependency)."""
    return settings
