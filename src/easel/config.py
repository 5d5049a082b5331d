"""Configuration management for easel."""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from easel.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="EASEL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Dialog windows
    dialog_width: int = Field(default=400, gt=0, description="Initial width of dialog windows")
    dialog_height: int = Field(default=200, gt=0, description="Initial height of dialog windows")
    dialog_timeout_seconds: float | None = Field(
        default=None,
        description="Give up on a dialog after this many seconds; unset waits until the dialog settles",
    )

    # Pictures
    max_picture_size: int = Field(default=10000, gt=0, description="Largest width or height of a new picture")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("dialog_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("dialog_timeout_seconds must be positive")
        return value


def load_settings(**overrides: Any) -> Settings:
    """Load settings from the environment and `.env`, applying explicit overrides.

    Raises:
        ConfigurationError: if a value fails validation.
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**updates)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
