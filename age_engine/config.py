"""Runtime configuration for the age_engine package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

The engine itself needs no configuration.  ``MODEL_ARN`` is only required
once the assistant agent is built (see ``age_engine.agent``).

Usage::

    from age_engine.config import settings

    print(settings.log_format)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    model_arn: str | None = Field(
        default=None,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN used by the assistant.",
    )
    log_format: str = Field(
        default="text",
        alias="LOG_FORMAT",
        description="'json' for structured console logs; anything else is plaintext.",
    )
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Root log level name for the CLI.",
    )

    @field_validator("log_format")
    @classmethod
    def _normalise_log_format(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return value.strip().upper()


settings = Settings()
