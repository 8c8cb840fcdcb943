"""Configuration management for notedoc."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from notedoc.formatting.ir import (
    BASE_COLOR,
    BASE_FONT,
    BASE_SIZE,
    MONOSPACE_FONT,
    Theme,
)


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Typography
    base_font: str = Field(default=BASE_FONT, alias="NOTEDOC_FONT")
    base_size: int = Field(
        default=BASE_SIZE,
        ge=4,
        alias="NOTEDOC_FONT_SIZE",
        description="Base font size in half-points",
    )
    base_color: str = Field(
        default=BASE_COLOR,
        pattern=r"^[0-9A-Fa-f]{6}$",
        alias="NOTEDOC_COLOR",
    )
    monospace_font: str = Field(default=MONOSPACE_FONT, alias="NOTEDOC_MONO_FONT")

    # Output
    default_format: str = Field(default="docx", alias="NOTEDOC_FORMAT")
    log_level: str = Field(default="WARNING", alias="NOTEDOC_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def theme(self) -> Theme:
        """Build the run theme from these settings."""
        return Theme(
            font=self.base_font,
            size=self.base_size,
            color=self.base_color.upper(),
            monospace_font=self.monospace_font,
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
