"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Localization settings class
    NotificationSettings: Token delivery settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_locale = settings.i18n.DEFAULT_LOCALE
    sender_id = settings.notifications.SMS_SENDER_ID
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import (
    LocalizationSettings,
    NotificationSettings,
)

__all__ = ["Settings", "LocalizationSettings", "NotificationSettings"]
