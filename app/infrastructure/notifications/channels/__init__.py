"""Notification channel interfaces and in-process implementations."""

from infrastructure.notifications.channels.base import (
    DestinationMarker,
    EmailSender,
    SmsSender,
    StatisticsCounter,
    as_destination_marker,
    as_email_sender,
    as_sms_sender,
)
from infrastructure.notifications.channels.email import InMemoryEmailQueue, QueuedEmail
from infrastructure.notifications.channels.sms import InMemorySmsQueue, QueuedSms

__all__ = [
    "EmailSender",
    "SmsSender",
    "DestinationMarker",
    "StatisticsCounter",
    "as_email_sender",
    "as_sms_sender",
    "as_destination_marker",
    "InMemoryEmailQueue",
    "QueuedEmail",
    "InMemorySmsQueue",
    "QueuedSms",
]
