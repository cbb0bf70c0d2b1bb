"""Application settings loaded from the environment.

Every field can be overridden with a ``BITEBRAIN_``-prefixed environment
variable (``BITEBRAIN_LAT=44.1``) or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bitebrain.offline.tiles import DEFAULT_TILE_URL_TEMPLATE


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BITEBRAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "bitebrain"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Default location: geographic centre of the contiguous US.
    lat: float = Field(default=39.8283, ge=-90, le=90)
    lon: float = Field(default=-98.5795, ge=-180, le=180)
    timezone: str = "America/New_York"

    api_host: str = "127.0.0.1"
    api_port: int = 8000

    data_dir: Path = Path("data")
    mapbox_token: str | None = None
    tile_url_template: str = DEFAULT_TILE_URL_TEMPLATE


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; call ``get_settings.cache_clear()`` after env changes."""
    return Settings()
