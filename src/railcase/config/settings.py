"""Environment-based configuration using pydantic-settings.

Settings only affect the library's own diagnostics; container semantics never
depend on configuration.

Example:
    >>> from railcase.config import get_settings
    >>> get_settings().logging.level
    'INFO'

    # Or with environment variables:
    # RAILCASE_LOG_LEVEL=DEBUG
    # RAILCASE_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "none"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "INFO"
    format: LogFormat = "console"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class RailcaseSettings(BaseSettings):
    """Root settings for railcase.

    Loads configuration from environment variables with the RAILCASE_ prefix.

    Example environment variables:
        RAILCASE_DEBUG=true
        RAILCASE_LOG_LEVEL=DEBUG
        RAILCASE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG logging regardless of level")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def effective_log_level(self) -> LogLevel:
        """Level actually applied by configure_logging()."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> RailcaseSettings:
    """Get the global settings instance (cached)."""
    return RailcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
