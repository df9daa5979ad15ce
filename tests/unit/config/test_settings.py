"""Unit tests for environment-based configuration.

Tests verify:
- Defaults
- UNINA_-prefixed environment overrides
- Log level and log format validation
- Singleton behavior of get_settings
"""

import pytest
from pydantic import ValidationError

from unina.config.settings import DEFAULT_DATABASE_PATH, Settings, get_settings


@pytest.mark.unit
def test_defaults():
    """Settings load without any environment variables."""
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.log_to_file is False
    assert settings.log_file_dir == "logs"
    assert settings.database_path == str(DEFAULT_DATABASE_PATH)
    assert settings.ucd_dir == "ucd"


@pytest.mark.unit
def test_default_database_lives_in_package_data():
    assert DEFAULT_DATABASE_PATH.name == "database.json"
    assert DEFAULT_DATABASE_PATH.parent.name == "data"
    assert DEFAULT_DATABASE_PATH.parent.parent.name == "unina"


@pytest.mark.unit
def test_environment_overrides(monkeypatch, tmp_path):
    """UNINA_-prefixed variables override every field."""
    monkeypatch.setenv("UNINA_DATABASE_PATH", str(tmp_path / "names.yaml"))
    monkeypatch.setenv("UNINA_UCD_DIR", str(tmp_path / "ucd"))
    monkeypatch.setenv("UNINA_LOG_LEVEL", "debug")
    monkeypatch.setenv("UNINA_LOG_FORMAT", "console")
    monkeypatch.setenv("UNINA_LOG_TO_FILE", "true")

    settings = Settings()

    assert settings.database_path == str(tmp_path / "names.yaml")
    assert settings.ucd_dir == str(tmp_path / "ucd")
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "console"
    assert settings.log_to_file is True


@pytest.mark.unit
def test_invalid_log_level_raises(monkeypatch):
    monkeypatch.setenv("UNINA_LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert "Unknown log level" in str(exc_info.value)


@pytest.mark.unit
def test_invalid_log_format_raises(monkeypatch):
    monkeypatch.setenv("UNINA_LOG_FORMAT", "xml")

    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.unit
def test_settings_singleton(monkeypatch):
    """get_settings returns the cached instance until the cache is cleared."""
    first = get_settings()
    monkeypatch.setenv("UNINA_UCD_DIR", "elsewhere")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().ucd_dir == "elsewhere"
