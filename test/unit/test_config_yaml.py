"""Unit tests for YAML configuration loading."""

import pytest

import config as config_module


def _clear_env(monkeypatch, keys):
    """Clear environment variables for config tests."""
    for key in keys:
        monkeypatch.delenv(key, raising=False)


_ENV_KEYS = ["DATABASE_URL", "LOG_LEVEL", "LOG_JSON", "MAX_VISIBLE_NOTIFICATIONS"]


def test_yaml_precedence(monkeypatch, tmp_path):
    """Environment variables override secrets, user, and default YAML."""
    defaults = tmp_path / "defaults.yml"
    user_cfg = tmp_path / "user.yml"
    secrets = tmp_path / "secrets.yml"

    defaults.write_text(
        "\n".join(
            [
                "log_level: warning",
                "database:",
                "  url: sqlite:///default.db",
                "grouping:",
                "  max_visible_notifications: 10",
            ]
        ),
        encoding="utf-8",
    )
    user_cfg.write_text(
        "\n".join(
            [
                "database:",
                "  url: sqlite:///user.db",
                "grouping:",
                "  max_visible_notifications: 20",
            ]
        ),
        encoding="utf-8",
    )
    secrets.write_text(
        "\n".join(
            [
                "database:",
                "  url: sqlite:///secrets.db",
                "grouping:",
                "  max_visible_notifications: 30",
            ]
        ),
        encoding="utf-8",
    )

    _clear_env(monkeypatch, _ENV_KEYS)
    monkeypatch.setenv("MAX_VISIBLE_NOTIFICATIONS", "40")

    monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", defaults)
    monkeypatch.setattr(config_module, "_USER_CONFIG_PATHS", [user_cfg])
    monkeypatch.setattr(config_module, "_USER_SECRETS_PATHS", [secrets])

    settings = config_module.Settings()

    assert settings.grouping.max_visible_notifications == 40
    assert settings.database.url == "sqlite:///secrets.db"
    assert settings.log_level == "WARNING"


def test_missing_yaml_files(monkeypatch, tmp_path):
    """Missing YAML files fall back to environment settings and defaults."""
    _clear_env(monkeypatch, _ENV_KEYS)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///env.db")
    monkeypatch.setenv("LOG_JSON", "true")

    monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "missing-default.yml")
    monkeypatch.setattr(config_module, "_USER_CONFIG_PATHS", [tmp_path / "missing-user.yml"])
    monkeypatch.setattr(config_module, "_USER_SECRETS_PATHS", [tmp_path / "missing-secrets.yml"])

    settings = config_module.Settings()

    assert settings.database.url == "sqlite:///env.db"
    assert settings.log_json is True
    assert settings.grouping.max_visible_notifications == 49


def test_non_mapping_yaml_raises(monkeypatch, tmp_path):
    """Non-mapping YAML raises a validation error."""
    defaults = tmp_path / "defaults.yml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")

    monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", defaults)
    monkeypatch.setattr(config_module, "_USER_CONFIG_PATHS", [])
    monkeypatch.setattr(config_module, "_USER_SECRETS_PATHS", [])

    with pytest.raises(ValueError, match="Config file must contain a mapping"):
        config_module.Settings()


def test_non_positive_limit_is_rejected(monkeypatch, tmp_path):
    """A visible notification limit below one fails validation."""
    _clear_env(monkeypatch, _ENV_KEYS)
    monkeypatch.setenv("MAX_VISIBLE_NOTIFICATIONS", "0")
    monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "missing.yml")
    monkeypatch.setattr(config_module, "_USER_CONFIG_PATHS", [])
    monkeypatch.setattr(config_module, "_USER_SECRETS_PATHS", [])

    with pytest.raises(ValueError, match="max_visible_notifications"):
        config_module.Settings()


def test_unknown_log_level_is_rejected(monkeypatch, tmp_path):
    """Log levels must be standard logging names."""
    _clear_env(monkeypatch, _ENV_KEYS)
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "missing.yml")
    monkeypatch.setattr(config_module, "_USER_CONFIG_PATHS", [])
    monkeypatch.setattr(config_module, "_USER_SECRETS_PATHS", [])

    with pytest.raises(ValueError, match="log_level"):
        config_module.Settings()
