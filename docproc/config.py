"""
Settings for the CLI and the HTTP API.

Values come from defaults, an optional YAML file and DOCPROC_* environment
variables, in that order of precedence (environment wins).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MiB

ENV_PREFIX = "DOCPROC_"
CONFIG_ENV = "DOCPROC_CONFIG"


class ConfigError(Exception):
    """Invalid configuration file or environment value."""


class Settings(BaseSettings):
    """Runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="forbid",
        frozen=True,
    )

    max_bytes: int = Field(
        default=DEFAULT_MAX_BYTES,
        ge=0,
        description="Maximum input size in bytes (0 = unlimited)",
    )
    chunk_size: int = Field(default=4096, gt=0, description="Bytes per stream read")
    threshold: int = Field(
        default=0,
        ge=0,
        description="Position count a document must exceed to be counted in xcount",
    )
    username: str = Field(default="vs", description="HTTP Basic user name")
    password: str = Field(default="rekrutacja", description="HTTP Basic password")
    log_level: str = Field(default="WARNING")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment first so DOCPROC_* overrides values read from the YAML file
        return env_settings, init_settings

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def effective_max_bytes(self) -> int | None:
        """max_bytes with 0 mapped to None (unlimited)."""
        return self.max_bytes or None


def load_settings(path: Path | str | None = None) -> Settings:
    """
    Load settings.

    Args:
        path: YAML config file; defaults to $DOCPROC_CONFIG if set

    Returns:
        Settings

    Raises:
        ConfigError: If the file is unreadable or a value is invalid
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV)
        path = Path(env_path) if env_path else None

    values = _read_yaml(Path(path)) if path is not None else {}

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e)) from None


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from None

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "Invalid configuration: " + "; ".join(parts)
