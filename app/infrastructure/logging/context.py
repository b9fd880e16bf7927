"""Dispatch context binding for structured logging.

Binds delivery-scoped values (correlation id, policy) to every log entry
emitted while a notification is being dispatched.

Usage:
    from infrastructure.logging import bind_dispatch_context

    with bind_dispatch_context(policy="BOTH"):
        logger.info("notification_dispatch_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_dispatch_context(
    correlation_id: Optional[str] = None,
    policy: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind dispatch-scoped context to all logs within the block.

    A correlation id already present in the context is reused, so nested
    dispatches (token sender -> dispatcher) share one id.

    Args:
        correlation_id: Unique dispatch identifier. Reused or generated if
            not provided.
        policy: Delivery policy name for this dispatch.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The correlation id bound for the block.
    """
    context: dict[str, Any] = {}
    existing = get_correlation_id()

    if correlation_id is not None or existing is None:
        context["correlation_id"] = correlation_id or str(uuid.uuid4())

    if policy is not None:
        context["policy"] = policy

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context.get("correlation_id", existing)
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_dispatch_context() -> None:
    """Clear all context bound to the current logging context."""
    structlog.contextvars.clear_contextvars()
