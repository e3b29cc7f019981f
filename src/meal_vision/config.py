"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

MATCH_STRATEGIES = frozenset({"substring", "cascade"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_model: str = "gpt-4.1-mini"
    vision_timeout_seconds: float = 30.0
    image_timeout_seconds: float = 15.0
    catalog_match_strategy: str = "substring"
    catalog_cache_ttl_seconds: int = 300
    timezone: str = "UTC"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_match_strategy(raw: str | None) -> str:
    """Normalize the configured catalog match strategy name."""
    if raw is None:
        return "substring"
    cleaned = raw.strip().lower()
    if cleaned in MATCH_STRATEGIES:
        return cleaned
    return "substring"
