"""Structured logging infrastructure.

Centralized logging configuration and utilities built on structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_dispatch_context(): Context manager for dispatch-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_dispatch_context(): Clear all bound context

Processors:
    - add_app_info(): Add app name/version
    - mask_sensitive_data(): Redact secrets such as tokens
    - mask_destinations(): Partially hide email addresses and SMS numbers
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_dispatch_context,
    get_correlation_id,
    clear_dispatch_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    mask_destinations,
    obscure_destination,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_dispatch_context",
    "get_correlation_id",
    "clear_dispatch_context",
    # Processors
    "add_app_info",
    "mask_sensitive_data",
    "mask_destinations",
    "obscure_destination",
    "SENSITIVE_PATTERNS",
]
