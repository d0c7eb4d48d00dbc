"""Configuration helpers for slashdb_configurator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PATH = Path(".env")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    schema_path: Optional[Path] = Field(
        None, validation_alias="SCHEMA_PATH", description="Schema JSON file loaded on start-up"
    )
    event_log_dir: Path = Field(
        Path("logs"), validation_alias="EVENT_LOG_DIR", description="Directory for change event logs"
    )
    enable_event_log: bool = Field(True, validation_alias="ENABLE_EVENT_LOG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _ensure_known_level(cls, value: str) -> str:
        """Ensure the log level is one the logging module understands."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(**overrides: Any) -> Settings:
    """Load settings with optional overrides."""

    return Settings(**overrides)


def _serialize_env_value(value: Any) -> str:
    """Convert a Python value into a .env-friendly string."""

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def persist_settings(updates: Dict[str, Any]) -> None:
    """Persist provided settings into the .env file, keeping other lines intact."""

    serialized = {key: _serialize_env_value(value) for key, value in updates.items() if value is not None}
    if not serialized:
        return

    env_path = ENV_PATH
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in serialized.items():
        set_key(env_path, key, value)


__all__ = ["Settings", "load_settings", "persist_settings"]
