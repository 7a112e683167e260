"""Environment-driven package settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings loaded from environment variables with TYPED_JSONAPI_ prefix."""

    # Version advertised in the top-level ``jsonapi`` member; unset omits it
    jsonapi_version: Optional[str] = None
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="TYPED_JSONAPI_")


@lru_cache
def get_settings() -> Settings:
    """Return cached package settings instance."""
    return Settings()
