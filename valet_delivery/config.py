"""Centralised application settings loaded from environment / .env file."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Courier locator
    valet_location_url: Optional[str] = None
    locator_timeout_seconds: float = 10.0

    # API
    rate_limit: str = "100/minute"

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Build the settings once; pass the result explicitly to collaborators."""
    return Settings()
