"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.i18n import LocalizationSettings
from infrastructure.configuration.features.notifications import (
    NotificationSettings,
)

__all__ = [
    "LocalizationSettings",
    "NotificationSettings",
]
