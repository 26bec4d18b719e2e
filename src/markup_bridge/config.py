"""Configuration management for Markup Bridge."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Legacy dialect characters
    legacy_character: str = Field(
        default="&",
        min_length=1,
        max_length=1,
        alias="MARKUP_BRIDGE_LEGACY_CHAR",
    )
    hex_character: str = Field(
        default="#",
        min_length=1,
        max_length=1,
        alias="MARKUP_BRIDGE_HEX_CHAR",
    )

    # Section marker rewritten to the legacy character before formatting
    section_marker: str = Field(
        default="§",
        min_length=1,
        max_length=1,
        alias="MARKUP_BRIDGE_SECTION_MARKER",
    )
    normalize_section_marker: bool = Field(
        default=True,
        alias="MARKUP_BRIDGE_NORMALIZE_SECTION",
    )

    # Formatter used by the CLI when none is given
    default_formatter: str = Field(
        default="universal",
        alias="MARKUP_BRIDGE_FORMATTER",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
