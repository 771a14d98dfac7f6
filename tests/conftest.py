"""
Test Configuration
==================

Pytest configuration with shared fixtures: testing settings, markup context,
helper set, template renderer and sample records.
"""

import pytest
from pathlib import Path
from typing import Generator
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

from markup_helpers.config import settings as settings_module
from markup_helpers.config.settings import Settings
from markup_helpers.core import context as context_module
from markup_helpers.core.context import MarkupContext
from markup_helpers.core.environment import TemplateRenderer, create_environment
from markup_helpers.helpers import TemplateHelpers

from tests.utils.records import Person

TEMPLATE_DIR = Path(__file__).parent / "templates"


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"
    template_path: Path = TEMPLATE_DIR

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override application settings for testing."""
    with patch.object(settings_module, "settings", test_settings), patch.object(
        context_module, "context", None
    ):
        yield test_settings


@pytest.fixture
def markup_context(test_settings: TestSettings) -> MarkupContext:
    """Markup context bound to the test settings."""
    return MarkupContext(test_settings)


@pytest.fixture
def helpers(markup_context: MarkupContext) -> TemplateHelpers:
    """Helper set bound to the test markup context."""
    return TemplateHelpers(markup_context)


@pytest.fixture
def renderer(test_settings: TestSettings, helpers: TemplateHelpers) -> TemplateRenderer:
    """Template renderer with the helpers registered."""
    return TemplateRenderer(create_environment(test_settings, helpers))


@pytest.fixture
def person() -> Person:
    """Sample record with a blank email and no nickname."""
    return Person()
