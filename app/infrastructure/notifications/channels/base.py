"""Notification collaborator interfaces.

The dispatcher depends only on these capabilities, so real transports,
queues and test doubles are interchangeable.
"""

from typing import Callable, Protocol, runtime_checkable

from infrastructure.notifications.models import (
    DestinationRecordType,
    EmailContent,
    SmsContent,
)


@runtime_checkable
class EmailSender(Protocol):
    """Sends or enqueues an email.

    Implementations return False on failure and log the cause themselves.

    Example Implementation:
        class GmailSender:
            def send_email(self, address: str, content: EmailContent) -> bool:
                return gmail.send(address, content.subject, content.body_plain)
    """

    def send_email(self, address: str, content: EmailContent) -> bool: ...


@runtime_checkable
class SmsSender(Protocol):
    """Sends or enqueues an SMS.

    ``content`` carries the sender id and the maximum text length.
    """

    def send_sms(self, number: str, content: SmsContent) -> bool: ...


@runtime_checkable
class DestinationMarker(Protocol):
    """Records that a destination was targeted.

    Used for rate limiting and intrusion detection; called before every
    send attempt whatever its outcome. Must be safe for concurrent use.
    """

    def mark(self, record_type: DestinationRecordType, destination: str) -> None: ...


@runtime_checkable
class StatisticsCounter(Protocol):
    """Best-effort named counter. Must be safe for concurrent use."""

    def increment(self, name: str) -> None: ...


class CallableEmailSender:
    """Adapts a ``(address, content) -> bool`` function to EmailSender."""

    def __init__(self, func: Callable[[str, EmailContent], bool]):
        self._func = func

    def send_email(self, address: str, content: EmailContent) -> bool:
        return bool(self._func(address, content))


class CallableSmsSender:
    """Adapts a ``(number, content) -> bool`` function to SmsSender."""

    def __init__(self, func: Callable[[str, SmsContent], bool]):
        self._func = func

    def send_sms(self, number: str, content: SmsContent) -> bool:
        return bool(self._func(number, content))


class CallableDestinationMarker:
    """Adapts a ``(record_type, destination) -> None`` function to DestinationMarker."""

    def __init__(self, func: Callable[[DestinationRecordType, str], None]):
        self._func = func

    def mark(self, record_type: DestinationRecordType, destination: str) -> None:
        self._func(record_type, destination)


def _provides(obj, method_name: str) -> bool:
    """True when ``obj`` offers ``method_name`` as a method.

    Callables qualify only through their type, so functions and callable
    objects that create attributes on access are wrapped instead.
    """
    if callable(getattr(type(obj), method_name, None)):
        return True
    return not callable(obj) and callable(getattr(obj, method_name, None))


def as_email_sender(sender) -> EmailSender:
    """Return ``sender`` as an EmailSender, wrapping plain callables."""
    if _provides(sender, "send_email"):
        return sender
    if callable(sender):
        return CallableEmailSender(sender)
    raise TypeError(f"Not an email sender: {sender!r}")


def as_sms_sender(sender) -> SmsSender:
    """Return ``sender`` as an SmsSender, wrapping plain callables."""
    if _provides(sender, "send_sms"):
        return sender
    if callable(sender):
        return CallableSmsSender(sender)
    raise TypeError(f"Not an SMS sender: {sender!r}")


def as_destination_marker(marker) -> DestinationMarker:
    """Return ``marker`` as a DestinationMarker, wrapping plain callables."""
    if _provides(marker, "mark"):
        return marker
    if callable(marker):
        return CallableDestinationMarker(marker)
    raise TypeError(f"Not a destination marker: {marker!r}")
