"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from legalaid.configs.base import ServiceSettings
from legalaid.configs.cache import CacheSettings
from legalaid.configs.database import DatabaseSettings
from legalaid.configs.nlp import NLPSettings


class Settings(ServiceSettings):
    """Unified application settings aggregating all config modules."""

    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    cache: CacheSettings = CacheSettings()
    nlp: NLPSettings = NLPSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from legalaid.configs import get_settings
        settings = get_settings()
    """
    return Settings()
