"""
Shared settings base for the legal aid service.

Every settings group reads the same ``.env`` file. Groups with their own
variable prefix (``POSTGRES_``, ``REDIS_``, ``GHANA_NLP_``) build their
config through ``settings_config``; the service-wide fields below are read
without a prefix.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"

Environment = Literal["development", "staging", "production"]


def settings_config(env_prefix: str = "") -> SettingsConfigDict:
    """Config dict for a settings group reading ``<env_prefix><FIELD>`` variables."""
    return SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix=env_prefix,
        case_sensitive=False,
        extra="ignore",
    )


class BaseSettings(PydanticBaseSettings):
    """Base for every settings group."""

    model_config = settings_config()


class ServiceSettings(BaseSettings):
    """Service identity and runtime mode."""

    service_name: str = Field(
        default="legalaid-api",
        description="Name reported in startup logs and the API title",
    )
    environment: Environment = Field(
        default="development",
        description="Deployment environment",
    )
    debug: bool = Field(
        default=False,
        description="Expose interactive API docs even in production",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level name",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        name = value.upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return name

    @property
    def docs_enabled(self) -> bool:
        """Swagger and ReDoc are served outside production, or when debugging."""
        return self.environment != "production" or self.debug
