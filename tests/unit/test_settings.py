"""
Unit Tests for Configuration
============================

Tests for settings validation, environment overrides and logging configuration.
"""

import pytest
from pydantic import ValidationError

from markup_helpers.config import settings as settings_module
from markup_helpers.config.logging import get_logger, get_logging_config
from markup_helpers.config.settings import Settings, get_settings, reload_settings

pytestmark = pytest.mark.unit


class TestSettings:
    """Test settings defaults and validation."""

    def test_rendering_defaults(self):
        """Test rendering defaults."""
        settings = Settings(environment="testing")
        assert settings.blank_placeholder == "-"
        assert settings.horizontal_list_class == "dl-horizontal"
        assert settings.modal_close_label == "Close"
        assert settings.dropdown_trigger_label == "Dropdown Trigger"
        assert settings.template_path is None
        assert settings.log_dir is None

    def test_invalid_environment(self):
        """Test unknown environments are rejected."""
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_log_level_normalized(self):
        """Test log levels are upper-cased."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_environment_variable_override(self, monkeypatch):
        """Test prefixed environment variables override defaults."""
        monkeypatch.setenv("MARKUP_HELPERS_BLANK_PLACEHOLDER", "n/a")
        monkeypatch.setenv("MARKUP_HELPERS_HORIZONTAL_LIST_CLASS", "row")
        settings = Settings()
        assert settings.blank_placeholder == "n/a"
        assert settings.horizontal_list_class == "row"

    def test_log_dir_created(self, tmp_path):
        """Test the log directory is created on validation."""
        log_dir = tmp_path / "logs"
        Settings(log_dir=log_dir)
        assert log_dir.is_dir()

    def test_get_settings_returns_active_instance(self, test_settings):
        """Test the global accessor returns the overridden settings."""
        assert get_settings() is test_settings

    def test_reload_settings(self, monkeypatch, test_settings):
        """Test reload replaces the global instance."""
        monkeypatch.setattr(settings_module, "settings", test_settings)
        reloaded = reload_settings()
        assert reloaded is not test_settings
        assert get_settings() is reloaded


class TestLoggingConfig:
    """Test logging configuration."""

    def test_console_only_without_log_dir(self):
        """Test only the console handler is configured by default."""
        config = get_logging_config(Settings(environment="development"))
        assert set(config["handlers"]) == {"console"}
        assert config["loggers"][""]["handlers"] == ["console"]

    def test_file_handlers_with_log_dir(self, tmp_path):
        """Test rotating file handlers are added when a log directory is set."""
        config = get_logging_config(Settings(environment="development", log_dir=tmp_path))
        assert set(config["handlers"]) == {"console", "file", "error_file"}
        assert config["handlers"]["file"]["filename"] == str(tmp_path / "markup_helpers.log")
        assert config["handlers"]["error_file"]["level"] == "ERROR"

    def test_no_file_handlers_in_testing(self, tmp_path):
        """Test the testing environment logs to the console only."""
        config = get_logging_config(Settings(environment="testing", log_dir=tmp_path))
        assert set(config["handlers"]) == {"console"}

    def test_production_uses_json_formatter(self):
        """Test production console output is JSON."""
        config = get_logging_config(Settings(environment="production"))
        assert config["handlers"]["console"]["formatter"] == "json"

    def test_level_follows_settings(self):
        """Test handler and root levels follow the configured level."""
        config = get_logging_config(Settings(environment="development", log_level="warning"))
        assert config["handlers"]["console"]["level"] == "WARNING"
        assert config["loggers"][""]["level"] == "WARNING"

    def test_get_logger(self):
        """Test structured loggers can be created and bound."""
        logger = get_logger("tests")
        assert logger is not None
        assert logger.bind(component="test") is not None
