"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() caching behavior
- get_content_resolver() default locale wiring
- get_notification_service() wiring
"""

import pytest

from infrastructure.configuration import Settings
from infrastructure.i18n.content import LocalizedContentResolver
from infrastructure.i18n.models import LocaleTag
from infrastructure.notifications.service import NotificationService
from infrastructure.services.providers import (
    get_content_resolver,
    get_notification_service,
    get_settings,
)


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        instance2 = get_settings()
        assert instance1 is not instance2


@pytest.mark.unit
class TestGetContentResolver:
    """Tests for get_content_resolver()."""

    def test_uses_configured_default_locale(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LOCALE", "de_AT")

        resolver = get_content_resolver()

        assert isinstance(resolver, LocalizedContentResolver)
        assert resolver.default_locale == LocaleTag("de", "AT")

    def test_returns_cached_instance(self):
        assert get_content_resolver() is get_content_resolver()


@pytest.mark.unit
class TestGetNotificationService:
    """Tests for get_notification_service()."""

    def test_returns_cached_service(self):
        service = get_notification_service()

        assert isinstance(service, NotificationService)
        assert service is get_notification_service()

    def test_service_uses_settings(self, monkeypatch):
        monkeypatch.setenv("NOTIFICATION_SUCCESS_STATISTIC", "TOKENS")

        service = get_notification_service()

        assert service.dispatcher.success_statistic == "TOKENS"
