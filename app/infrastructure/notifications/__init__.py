"""Policy-driven notification delivery.

Delivers a message over email and/or SMS according to a DeliveryPolicy,
marking each targeted destination for rate limiting before the attempt.

Usage:
    from infrastructure.notifications import (
        DeliveryAddressSet,
        DeliveryPolicy,
        EmailContent,
        NotificationDispatcher,
        SmsContent,
    )

    dispatcher = NotificationDispatcher(
        email_sender=email_queue,
        sms_sender=sms_queue,
        destination_marker=marker,
    )
    outcome = dispatcher.dispatch(
        DeliveryPolicy.BOTH,
        DeliveryAddressSet(email_address="user@example.com", sms_number="+15551234567"),
        EmailContent(subject="Code", body_plain="Your code is 1234"),
        SmsContent(message="Your code is 1234"),
    )
    logger.info("delivered", channels=outcome.channels_succeeded)
"""

# Models
from infrastructure.notifications.models import (
    DeliveryAddressSet,
    DeliveryChannel,
    DeliveryOutcome,
    DeliveryPolicy,
    DestinationRecordType,
    EmailContent,
    SmsContent,
)

# Errors
from infrastructure.notifications.errors import (
    InvalidPolicyError,
    NoViableChannelError,
    NotificationError,
)

# Dispatcher
from infrastructure.notifications.dispatcher import NotificationDispatcher

# Channel interfaces and in-process implementations
from infrastructure.notifications.channels.base import (
    DestinationMarker,
    EmailSender,
    SmsSender,
    StatisticsCounter,
)
from infrastructure.notifications.channels.email import InMemoryEmailQueue
from infrastructure.notifications.channels.sms import InMemorySmsQueue
from infrastructure.notifications.tracking import (
    InMemoryDestinationMarker,
    InMemoryStatistics,
)

# Token delivery
from infrastructure.notifications.tokens import (
    TOKEN_PLACEHOLDER,
    EmailTemplate,
    TokenSender,
)
from infrastructure.notifications.service import NotificationService

__all__ = [
    # Models
    "DeliveryAddressSet",
    "DeliveryChannel",
    "DeliveryOutcome",
    "DeliveryPolicy",
    "DestinationRecordType",
    "EmailContent",
    "SmsContent",
    # Errors
    "NotificationError",
    "InvalidPolicyError",
    "NoViableChannelError",
    # Dispatcher
    "NotificationDispatcher",
    # Channel interfaces
    "EmailSender",
    "SmsSender",
    "DestinationMarker",
    "StatisticsCounter",
    # In-process implementations
    "InMemoryEmailQueue",
    "InMemorySmsQueue",
    "InMemoryDestinationMarker",
    "InMemoryStatistics",
    # Token delivery
    "TOKEN_PLACEHOLDER",
    "EmailTemplate",
    "TokenSender",
    "NotificationService",
]
