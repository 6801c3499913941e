"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from meal_planner.services.stats import DEFAULT_RANGE_DAYS, RANGE_OPTIONS

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    cache_ttl_seconds: int = 300
    summary_default_days: int = 30

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_range_days(raw: int | None, default: int = DEFAULT_RANGE_DAYS) -> int:
    """Return a supported analytics range, falling back to the default."""
    if raw in RANGE_OPTIONS:
        return raw
    if default in RANGE_OPTIONS:
        return default
    return DEFAULT_RANGE_DAYS
