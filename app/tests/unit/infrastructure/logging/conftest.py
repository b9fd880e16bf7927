"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog
from unittest.mock import Mock

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.APP_NAME = "locale-notify"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_structlog():
    """Reset structlog to its defaults after the test reconfigures it."""
    yield
    structlog.reset_defaults()
