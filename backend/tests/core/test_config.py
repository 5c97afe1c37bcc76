"""
Configuration Unit Tests
========================

Tests for Settings defaults, environment overrides and validation.
"""

import pytest
from pydantic import ValidationError

from app.core.config import Settings, get_settings


pytestmark = pytest.mark.config


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings variables so defaults apply."""
    for name in (
        "APP_NAME",
        "APP_VERSION",
        "ENVIRONMENT",
        "DEBUG",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "CORS_ORIGINS",
        "API_PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsDefaults:
    """Tests for default values."""

    def test_defaults(self, clean_env):
        """Test defaults without environment overrides."""
        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.APP_NAME == "Compliance Tracker Role Registry"
        assert settings.ENVIRONMENT == "development"
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "console"
        assert settings.API_PREFIX == "/api/v1"
        assert settings.cors_origins_list == ["*"]


class TestSettingsOverrides:
    """Tests for environment overrides."""

    def test_environment_override(self, clean_env):
        """Test values are read from the environment."""
        # Arrange
        clean_env.setenv("ENVIRONMENT", "production")
        clean_env.setenv("LOG_FORMAT", "json")
        clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.ENVIRONMENT == "production"
        assert settings.LOG_FORMAT == "json"
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]

    def test_log_level_is_normalized(self, clean_env):
        """Test lowercase log levels are accepted."""
        # Arrange
        clean_env.setenv("LOG_LEVEL", "debug")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize(
        "raw, expected",
        [("api/v2/", "/api/v2"), ("/", ""), ("/api", "/api")],
    )
    def test_api_prefix_is_normalized(self, clean_env, raw, expected):
        """Test API prefix slashes are normalized."""
        # Arrange
        clean_env.setenv("API_PREFIX", raw)

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.API_PREFIX == expected


class TestSettingsValidation:
    """Tests for rejected values."""

    def test_invalid_environment(self, clean_env):
        """Test unknown environments are rejected."""
        clean_env.setenv("ENVIRONMENT", "staging")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_log_level(self, clean_env):
        """Test unknown log levels are rejected."""
        clean_env.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_log_format(self, clean_env):
        """Test unknown log formats are rejected."""
        clean_env.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_get_settings_is_singleton():
    """Test get_settings returns the cached instance."""
    assert get_settings() is get_settings()
