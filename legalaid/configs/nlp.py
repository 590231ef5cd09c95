"""
NLP provider configuration settings.

Credentials, endpoint and cache lifetimes for the GhanaNLP translation,
speech-to-text and text-to-speech APIs.

Dependencies: pydantic_settings
System role: External language provider configuration
"""

from pydantic import Field

from legalaid.configs.base import BaseSettings, settings_config


class NLPSettings(BaseSettings):
    """GhanaNLP provider configuration."""

    model_config = settings_config("GHANA_NLP_")

    api_key: str | None = Field(default=None, description="Subscription key")
    base_url: str | None = Field(
        default="https://translation-api.ghananlp.org",
        description="Provider base URL",
    )
    timeout_seconds: float = Field(default=30.0, description="HTTP timeout per call")

    translation_cache_ttl: int = Field(default=24 * 3600, description="Translation cache TTL")
    asr_cache_ttl: int = Field(default=3600, description="Speech-to-text cache TTL")
    tts_cache_ttl: int = Field(default=24 * 3600, description="Text-to-speech cache TTL")
    max_translation_chars: int = Field(
        default=1000,
        description="Input longer than this is truncated before translation",
    )

    @property
    def is_configured(self) -> bool:
        """Whether both credentials and endpoint are present."""
        return bool(self.api_key and self.base_url)
