"""
Configuration Loading Utilities.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = "configs/default_config.yaml"


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )


class StorageSettings(BaseModel):
    backend: Literal["memory", "sql"] = "memory"
    url: str = "sqlite:///protokit.db"
    seed: bool = True


def resolve_level(level: int | str) -> int:
    """
    Numeric logging level for a level number or name such as ``"debug"``.

    Raises:
        ValueError: If the name is not a logging level
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level {level!r}")
    return resolved


class LoggingSettings(BaseModel):
    level: str = "INFO"
    file: str | None = None
    file_level: str = "DEBUG"
    # Loggers held at WARNING whatever the console level is.
    quiet: list[str] = Field(default_factory=lambda: ["sqlalchemy.engine", "passlib", "httpx"])

    @field_validator("level", "file_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        resolve_level(value)
        return value.upper()


class ProtokitSettings(BaseModel):
    """Validated runtime configuration."""

    site: str = "africstays"
    server: ServerSettings = ServerSettings()
    storage: StorageSettings = StorageSettings()
    logging: LoggingSettings = LoggingSettings()


def load_config(config_path: str) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    # Validate required sections
    required_sections = ["server", "storage", "logging"]
    for section in required_sections:
        if config.get(section) is None:
            config[section] = {}

    return config


def apply_env_overrides(config: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Overlay ``PROTOKIT_*`` / ``CORS_ORIGINS`` environment variables.

    Args:
        config: Configuration dictionary as returned by :func:`load_config`
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        The same dictionary, updated in place
    """
    env = os.environ if environ is None else environ

    if env.get("PROTOKIT_SITE"):
        config["site"] = env["PROTOKIT_SITE"]
    if env.get("PROTOKIT_STORAGE"):
        config.setdefault("storage", {})["backend"] = env["PROTOKIT_STORAGE"]
    if env.get("PROTOKIT_DATABASE_URL"):
        storage = config.setdefault("storage", {})
        storage["url"] = env["PROTOKIT_DATABASE_URL"]
        # A database URL on its own implies the SQL backend.
        storage.setdefault("backend", "sql")
    if env.get("CORS_ORIGINS"):
        config.setdefault("server", {})["cors_origins"] = [
            origin.strip() for origin in env["CORS_ORIGINS"].split(",") if origin.strip()
        ]
    return config


def get_settings(config_path: str | None = None) -> ProtokitSettings:
    """Build settings from the YAML file (if present) plus the environment."""
    path = config_path or os.getenv("PROTOKIT_CONFIG", DEFAULT_CONFIG_PATH)
    try:
        config = load_config(path)
    except FileNotFoundError:
        if config_path is not None:
            raise
        config = {}
    return ProtokitSettings.model_validate(apply_env_overrides(config))
