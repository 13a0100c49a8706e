"""
Unit tests for configuration loading utilities.
"""

from __future__ import annotations

import logging
import tempfile

import pytest
import yaml
from pydantic import ValidationError

from protokit.backend.core.utils.config import (
    LoggingSettings,
    ProtokitSettings,
    apply_env_overrides,
    get_settings,
    load_config,
    resolve_level,
)


def _write_yaml(config: dict) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(config, f)
        f.flush()
        return f.name


class TestLoadConfig:
    def test_load_valid_config(self) -> None:
        config = {
            "site": "tiktalk",
            "server": {"host": "0.0.0.0", "port": 8080},
            "storage": {"backend": "sql", "url": "sqlite:///x.db"},
            "logging": {"level": "DEBUG"},
        }
        loaded = load_config(_write_yaml(config))

        assert loaded["site"] == "tiktalk"
        assert loaded["server"]["port"] == 8080
        assert loaded["storage"]["backend"] == "sql"

    def test_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/config.yaml")

    def test_missing_sections_get_defaults(self) -> None:
        """Config with missing required sections should get empty dicts."""
        loaded = load_config(_write_yaml({"site": "imusic"}))

        assert loaded["server"] == {}
        assert loaded["storage"] == {}
        assert loaded["logging"] == {}

    def test_empty_file_loads(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
        loaded = load_config(f.name)
        assert set(loaded) == {"server", "storage", "logging"}

    def test_default_config_loads(self) -> None:
        """The shipped default_config.yaml should load without errors."""
        config = load_config("configs/default_config.yaml")
        assert config["site"] == "africstays"
        assert config["storage"]["backend"] == "memory"
        assert config["server"]["port"] == 5000


class TestEnvOverrides:
    def test_site_and_storage(self) -> None:
        config = apply_env_overrides(
            {"storage": {}}, {"PROTOKIT_SITE": "homepros", "PROTOKIT_STORAGE": "sql"}
        )
        assert config["site"] == "homepros"
        assert config["storage"]["backend"] == "sql"

    def test_database_url_implies_sql(self) -> None:
        config = apply_env_overrides({}, {"PROTOKIT_DATABASE_URL": "sqlite:///env.db"})
        assert config["storage"] == {"url": "sqlite:///env.db", "backend": "sql"}

    def test_database_url_keeps_explicit_backend(self) -> None:
        config = apply_env_overrides(
            {"storage": {"backend": "memory"}}, {"PROTOKIT_DATABASE_URL": "sqlite:///env.db"}
        )
        assert config["storage"]["backend"] == "memory"

    def test_cors_origins_split(self) -> None:
        config = apply_env_overrides({}, {"CORS_ORIGINS": "http://a.test, http://b.test,"})
        assert config["server"]["cors_origins"] == ["http://a.test", "http://b.test"]

    def test_empty_environment_changes_nothing(self) -> None:
        config = {"server": {"port": 1}}
        assert apply_env_overrides(config, {}) == {"server": {"port": 1}}


class TestSettings:
    def test_defaults(self) -> None:
        settings = ProtokitSettings()
        assert settings.site == "africstays"
        assert settings.storage.backend == "memory"
        assert settings.storage.seed is True

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProtokitSettings.model_validate({"storage": {"backend": "mongo"}})

    def test_get_settings_from_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PROTOKIT_SITE", raising=False)
        monkeypatch.delenv("PROTOKIT_STORAGE", raising=False)
        monkeypatch.delenv("PROTOKIT_DATABASE_URL", raising=False)
        path = _write_yaml({"site": "projecttracker", "storage": {"seed": False}})

        settings = get_settings(path)

        assert settings.site == "projecttracker"
        assert settings.storage.seed is False
        assert settings.server.port == 5000

    def test_get_settings_env_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROTOKIT_SITE", "tiktalk")
        path = _write_yaml({"site": "projecttracker"})
        assert get_settings(path).site == "tiktalk"

    def test_explicit_missing_path_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            get_settings("/nonexistent/path/config.yaml")


class TestLoggingSettings:
    def test_level_names_are_normalised(self) -> None:
        settings = LoggingSettings(level="debug", file_level="warning")
        assert settings.level == "DEBUG"
        assert settings.file_level == "WARNING"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(level="chatty")

    def test_resolve_level(self) -> None:
        assert resolve_level("info") == logging.INFO
        assert resolve_level(logging.ERROR) == logging.ERROR
        with pytest.raises(ValueError):
            resolve_level("nope")

    def test_default_quiet_loggers(self) -> None:
        assert "sqlalchemy.engine" in LoggingSettings().quiet
