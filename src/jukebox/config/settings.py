"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from ``JUKEBOX_``-prefixed environment variables with
support for .env files, type validation, and sensible defaults. Nested
settings are frozen after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import PlaylistNameStr


class PlayerSettings(BaseModel):
    """Player and playlist configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    playlist_name: PlaylistNameStr = Field(
        default="Rock Classics",
        validation_alias=AliasChoices("playlist_name", "playlist"),
    )
    shuffle_seed: int | None = Field(
        default=None, validation_alias=AliasChoices("shuffle_seed", "seed")
    )
    load_demo_library: bool = Field(
        default=True, validation_alias=AliasChoices("load_demo_library", "demo")
    )
    power_on_at_start: bool = False


class Settings(BaseSettings):
    """Application settings container.

    Environment variable naming:
    - JUKEBOX_ENVIRONMENT, JUKEBOX_LOG_LEVEL (top-level)
    - JUKEBOX_PLAYER__PLAYLIST_NAME, JUKEBOX_PLAYER__SHUFFLE_SEED, etc. (nested)
    """

    model_config = SettingsConfigDict(
        env_prefix="JUKEBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    player: PlayerSettings = Field(default_factory=PlayerSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=sorted(valid_levels))
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
