"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.content import LocalizedContentResolver
from infrastructure.logging import configure_logging
from infrastructure.notifications.service import NotificationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Usage:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Structured logging is configured from the loaded settings on first call.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    settings = Settings()
    configure_logging(settings=settings)
    return settings


@lru_cache
def get_content_resolver() -> LocalizedContentResolver:
    """
    Get application-scoped localized content resolver.

    Returns:
        LocalizedContentResolver: Resolver using settings.i18n.DEFAULT_LOCALE.
    """
    return LocalizedContentResolver(
        default_locale=get_settings().i18n.default_locale_tag
    )


@lru_cache
def get_notification_service() -> NotificationService:
    """
    Get application-scoped notification service singleton.

    Returns:
        NotificationService: Service wired with the in-process collaborators.

    Usage:
        service = get_notification_service()
        service.send_token(addresses, token="493021")
    """
    return NotificationService(settings=get_settings())
