"""
Tests for Pydantic settings loaded from RUT_* environment variables.
"""

import pytest
from pydantic import ValidationError

from services.rut_id.rut import FormatStyle
from services.rut_id.settings import RutSettings, get_settings, settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and .env file."""
    for name in [
        "RUT_DEFAULT_STYLE",
        "RUT_GROUP_SEPARATOR",
        "RUT_LOG_LEVEL",
        "RUT_LOG_FORMAT",
        "RUT_SERVICE_NAME",
        "RUT_ENVIRONMENT",
    ]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        """Test values when nothing is configured."""
        config = RutSettings()

        assert config.default_style is FormatStyle.HUMAN
        assert config.group_separator == "."
        assert config.log_level == "INFO"
        assert config.log_format == "text"
        assert config.service_name == "rut-id"
        assert config.environment == "development"

    def test_settings_are_cached(self):
        """Test settings() returns the same instance."""
        assert settings() is settings()


class TestEnvironmentOverrides:
    """Test loading values from the environment."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("simple", FormatStyle.SIMPLE),
            ("NUMERIC", FormatStyle.NUMERIC),
            ("h", FormatStyle.HUMAN),
            ("default", FormatStyle.HUMAN),
        ],
    )
    def test_default_style(self, monkeypatch, value, expected):
        """Test style selectors are accepted."""
        monkeypatch.setenv("RUT_DEFAULT_STYLE", value)
        assert RutSettings().default_style is expected

    def test_normalizes_case(self, monkeypatch):
        """Test log level and format are normalized."""
        monkeypatch.setenv("RUT_LOG_LEVEL", "debug")
        monkeypatch.setenv("RUT_LOG_FORMAT", "JSON")
        monkeypatch.setenv("RUT_ENVIRONMENT", "Production")

        config = RutSettings()

        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.environment == "production"

    def test_group_separator(self, monkeypatch):
        """Test a custom group separator."""
        monkeypatch.setenv("RUT_GROUP_SEPARATOR", ",")
        assert RutSettings().group_separator == ","

    def test_env_file(self, tmp_path):
        """Test values read from a .env file."""
        (tmp_path / ".env").write_text("RUT_DEFAULT_STYLE=numeric\n", encoding="utf-8")
        assert RutSettings().default_style is FormatStyle.NUMERIC


class TestValidation:
    """Test invalid configuration values."""

    @pytest.mark.parametrize(
        "name,value",
        [
            ("RUT_DEFAULT_STYLE", "fancy"),
            ("RUT_GROUP_SEPARATOR", "5"),
            ("RUT_GROUP_SEPARATOR", "k"),
            ("RUT_GROUP_SEPARATOR", "-"),
            ("RUT_GROUP_SEPARATOR", ".."),
            ("RUT_LOG_LEVEL", "VERBOSE"),
            ("RUT_LOG_FORMAT", "xml"),
            ("RUT_ENVIRONMENT", "qa"),
        ],
        ids=[
            "unknown_style",
            "digit_separator",
            "K_separator",
            "dash_separator",
            "long_separator",
            "unknown_level",
            "unknown_format",
            "unknown_environment",
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        """Test invalid values raise a validation error."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            RutSettings()
