"""Application settings loaded from the environment and .env via Pydantic."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class EditorSettings(BaseSettings):
    config_path: Optional[Path] = Field(default=None)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="BEZIER_EDITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("config_path", mode="before")
    @classmethod
    def _expand_config_path(cls, value: Optional[str]) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


_settings: Optional[EditorSettings] = None


def get_settings() -> EditorSettings:
    global _settings
    if _settings is None:
        _settings = EditorSettings()
        if _settings.config_path is not None and not _settings.config_path.exists():
            logger.warning("Configured editor config file does not exist: %s", _settings.config_path)
    return _settings


def reset_settings_cache() -> None:
    global _settings
    _settings = None
