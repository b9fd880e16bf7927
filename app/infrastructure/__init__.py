"""Infrastructure modules for locale resolution and token delivery.

Components:
- configuration: Settings management (Settings, LocalizationSettings, NotificationSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale matching and localized content selection
- notifications: Policy-driven email/SMS delivery
- services: Application-scoped providers (get_settings, get_notification_service)
"""
