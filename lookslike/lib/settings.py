"""Environment-based settings using pydantic-settings.

Settings only drive ambient behaviour such as logging. How schemas compile
and evaluate never depends on the environment.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["LookslikeSettings"]


class LookslikeSettings(BaseSettings):
    """Settings loaded from ``LOOKSLIKE_`` environment variables or ``.env``.

    Example:
        >>> # LOOKSLIKE_LOG_LEVEL=DEBUG
        >>> # LOOKSLIKE_LOG_FORMAT=json
        >>> settings = LookslikeSettings()
        >>> settings.log_level
        'DEBUG'
    """

    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format: 'json' or 'console'")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_prefix="LOOKSLIKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level is a known value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate format is a known value."""
        valid_formats = ["json", "console", "text"]
        if v.lower() not in valid_formats:
            raise ValueError(f"log_format must be one of: {valid_formats}")
        return v.lower()
