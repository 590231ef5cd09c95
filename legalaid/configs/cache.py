"""
Cache configuration settings.

Redis connection and TTL settings for the session mirror and NLP result cache.

Dependencies: pydantic_settings
System role: Cache backend configuration
"""

from pydantic import Field

from legalaid.configs.base import BaseSettings, settings_config


class CacheSettings(BaseSettings):
    """Redis cache configuration."""

    model_config = settings_config("REDIS_")

    url: str | None = Field(
        default=None,
        description="Redis URL; caching is disabled when unset",
    )
    socket_timeout: float = Field(
        default=2.0,
        description="Socket timeout in seconds for cache operations",
    )
    session_ttl_seconds: int = Field(
        default=3600,
        description="TTL of chat session cache entries",
    )
