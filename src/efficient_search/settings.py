"""
Application Settings

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .search.google_client import DEFAULT_BASE_URL


class Settings(BaseSettings):
    """Application settings with validation and type safety."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Required settings
    google_api_key: str
    search_engine_id: str

    # Search settings
    google_search_base_url: str = DEFAULT_BASE_URL
    max_results: int = Field(default=10, ge=1, le=10)
    request_timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0)

    # Cache settings
    cache_ttl_minutes: float = Field(default=60, gt=0)
    cache_max_size: int = Field(default=100, gt=0)

    # Logging settings
    log_dir: str = "logs"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore
