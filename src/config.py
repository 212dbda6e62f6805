"""Configuration management for the notification grouping core."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_REPO_ROOT = Path(__file__).resolve().parents[1]
_DEFAULT_CONFIG_PATH = _REPO_ROOT / "config" / "grouping.yml"
_USER_CONFIG_PATHS = [
    Path("~/.config/notification-grouping/grouping.yml").expanduser(),
    Path("/config/grouping.yml"),
]
_USER_SECRETS_PATHS = [
    Path("~/.config/notification-grouping/secrets.yml").expanduser(),
    Path("/config/secrets.yml"),
]


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from disk, returning an empty mapping if missing."""
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def _yaml_settings_source(paths: list[Path]):
    """Create a Pydantic settings source for a list of YAML paths."""

    def source() -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for path in paths:
            merged.update(_load_yaml(path))
        return merged

    return source


def _set_nested_value(target: dict[str, Any], path: str, value: Any) -> None:
    """Set a dotted-path value on a nested mapping, creating containers."""
    parts = path.split(".")
    cursor = target
    for key in parts[:-1]:
        node = cursor.get(key)
        if not isinstance(node, dict):
            node = {}
            cursor[key] = node
        cursor = node
    cursor[parts[-1]] = value


def _parse_env_value(raw: str, kind: str) -> Any:
    """Parse an environment value into the requested primitive type."""
    if kind == "int":
        return int(raw)
    if kind == "bool":
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    if kind == "json":
        return json.loads(raw)
    return raw


def _env_settings_source():
    """Create a settings source that maps environment variables to config keys."""
    mapping = {
        "DATABASE_URL": ("database.url", "str"),
        "LOG_LEVEL": ("log_level", "str"),
        "LOG_JSON": ("log_json", "bool"),
        "MAX_VISIBLE_NOTIFICATIONS": ("grouping.max_visible_notifications", "int"),
    }

    def source() -> dict[str, Any]:
        data: dict[str, Any] = {}
        for env_key, (path, kind) in mapping.items():
            raw = os.environ.get(env_key)
            if raw is None:
                continue
            _set_nested_value(data, path, _parse_env_value(raw, kind))
        return data

    return source


class DatabaseConfig(BaseModel):
    """Notification ledger connection configuration."""

    url: str = "sqlite:///data/notifications.db"
    echo: bool = False


class GroupingConfig(BaseModel):
    """Grouping policy values consumed from the platform configuration."""

    max_visible_notifications: int = 49

    @field_validator("max_visible_notifications")
    @classmethod
    def validate_max_visible_notifications(cls, value: int) -> int:
        """Ensure the visible notification limit is positive."""
        if value < 1:
            raise ValueError("grouping.max_visible_notifications must be >= 1.")
        return value


class Settings(BaseSettings):
    """Application settings loaded from environment variables and YAML."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Layer settings sources in descending order of precedence."""
        return (
            init_settings,
            _env_settings_source(),
            _yaml_settings_source(_USER_SECRETS_PATHS),
            _yaml_settings_source(_USER_CONFIG_PATHS),
            _yaml_settings_source([_DEFAULT_CONFIG_PATH]),
        )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Ledger
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    # Grouping policy
    grouping: GroupingConfig = Field(default_factory=GroupingConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level name."""
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("log_level must be a standard logging level name.")
        return normalized


# Global settings instance
settings = Settings()
