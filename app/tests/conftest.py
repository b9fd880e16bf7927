"""Shared test fixtures."""

import pytest
import structlog

from infrastructure.configuration import Settings
from infrastructure.services import providers


@pytest.fixture(autouse=True)
def reset_providers():
    """Drop cached provider singletons and bound log context between tests."""
    providers.get_settings.cache_clear()
    providers.get_content_resolver.cache_clear()
    providers.get_notification_service.cache_clear()
    structlog.contextvars.clear_contextvars()
    yield
    providers.get_settings.cache_clear()
    providers.get_content_resolver.cache_clear()
    providers.get_notification_service.cache_clear()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def settings_factory(monkeypatch):
    """Build Settings from environment overrides.

    Example:
        settings = settings_factory(TOKEN_SEND_METHOD="BOTH", SMS_SENDER_ID="ACME")
    """

    def _factory(**env: str) -> Settings:
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return Settings()

    return _factory
