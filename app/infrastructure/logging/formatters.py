"""Custom log processors for structured logging.

This module provides processors that can be plugged into the structlog
pipeline to customize log output.

Usage:
    from infrastructure.logging.formatters import add_app_info, mask_sensitive_data

Dependencies:
    - structlog processors
"""

from typing import Any


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Create a processor that adds application info to log entries.

    Args:
        app_name: Name of the application.
        app_version: Version string for the application.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


# Key patterns whose values are never written to logs
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "authorization",
        "credential",
        "private_key",
    }
)

# Keys holding delivery destinations (email addresses, SMS numbers)
DESTINATION_KEYS = frozenset(
    {
        "destination",
        "email_address",
        "sms_number",
        "address",
        "number",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks sensitive data in log entries.

    Values are masked when their key contains one of the sensitive
    patterns (case-insensitive). The ``event`` key itself is never masked,
    so event names such as ``token_sent`` survive.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        masked_dict = {}
        for key, value in event_dict.items():
            key_lower = key.lower()
            is_sensitive = key != "event" and any(
                pattern in key_lower for pattern in patterns
            )
            if is_sensitive and value is not None:
                masked_dict[key] = mask_value
            else:
                masked_dict[key] = value
        return masked_dict

    return processor


def obscure_destination(value: str, visible: int = 2) -> str:
    """Obscure an email address or SMS number, keeping a few characters.

    ``alice@example.com`` becomes ``al***@example.com`` and
    ``+15551234567`` becomes ``+1********67``.

    Args:
        value: Destination to obscure.
        visible: Number of leading (and for numbers, trailing) characters kept.

    Returns:
        Obscured destination string.
    """
    if "@" in value:
        local, _, domain = value.partition("@")
        return f"{local[:visible]}***@{domain}"
    if len(value) <= visible * 2:
        return "*" * len(value)
    hidden = len(value) - visible * 2
    return f"{value[:visible]}{'*' * hidden}{value[-visible:]}"


def mask_destinations(visible: int = 2):
    """Create a processor that partially hides delivery destinations.

    Args:
        visible: Number of characters left readable, see obscure_destination().

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key in DESTINATION_KEYS:
            value = event_dict.get(key)
            if isinstance(value, str) and value:
                event_dict[key] = obscure_destination(value, visible)
        return event_dict

    return processor
