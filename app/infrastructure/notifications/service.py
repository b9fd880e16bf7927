"""Notification service for dependency injection.

Provides a class-based interface to the notification system for easier DI and testing.
"""

from typing import Optional, TYPE_CHECKING, Union

from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.notifications.models import (
    DeliveryAddressSet,
    DeliveryOutcome,
    DeliveryPolicy,
    EmailContent,
    SmsContent,
)
from infrastructure.notifications.tokens import EmailTemplate, TokenSender

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.notifications.channels.base import (
        DestinationMarker,
        EmailSender,
        SmsSender,
        StatisticsCounter,
    )


class NotificationService:
    """Class-based notification service.

    Wraps the NotificationDispatcher and TokenSender with a service
    interface to support dependency injection and easier testing with mocks.

    Collaborators that are not provided default to the in-process
    implementations (email/SMS queues, destination marker, statistics).

    Usage:
        # Via provider
        from infrastructure.services import get_notification_service

        service = get_notification_service()
        outcome = service.send_token(
            DeliveryAddressSet(email_address="user@example.com"),
            token="493021",
        )

        # Direct instantiation
        service = NotificationService(settings, email_sender=gmail_sender)
    """

    def __init__(
        self,
        settings: "Settings",
        email_sender: Optional["EmailSender"] = None,
        sms_sender: Optional["SmsSender"] = None,
        destination_marker: Optional["DestinationMarker"] = None,
        statistics: Optional["StatisticsCounter"] = None,
        dispatcher: Optional[NotificationDispatcher] = None,
    ):
        """Initialize notification service.

        Args:
            settings: Settings instance (required, passed from provider).
            email_sender: Optional EmailSender, defaults to InMemoryEmailQueue.
            sms_sender: Optional SmsSender, defaults to InMemorySmsQueue.
            destination_marker: Optional marker, defaults to InMemoryDestinationMarker.
            statistics: Optional counter, defaults to InMemoryStatistics.
            dispatcher: Optional pre-configured NotificationDispatcher. When
                given, the collaborator arguments are ignored.
        """
        if dispatcher is None:
            # Import here to keep the in-memory collaborators optional
            from infrastructure.notifications.channels.email import (
                InMemoryEmailQueue,
            )
            from infrastructure.notifications.channels.sms import InMemorySmsQueue
            from infrastructure.notifications.tracking import (
                InMemoryDestinationMarker,
                InMemoryStatistics,
            )

            dispatcher = NotificationDispatcher(
                email_sender=email_sender or InMemoryEmailQueue(),
                sms_sender=sms_sender or InMemorySmsQueue(),
                destination_marker=destination_marker or InMemoryDestinationMarker(),
                statistics=statistics or InMemoryStatistics(),
                success_statistic=settings.notifications.SUCCESS_STATISTIC,
                parallel_both=settings.notifications.PARALLEL_BOTH,
            )

        self._dispatcher = dispatcher
        self._token_sender = TokenSender(dispatcher, settings)
        self._settings = settings

    def dispatch(
        self,
        policy: Union[DeliveryPolicy, str, None],
        addresses: DeliveryAddressSet,
        email_content: EmailContent,
        sms_content: SmsContent,
    ) -> DeliveryOutcome:
        """Deliver through the channels selected by ``policy``.

        See NotificationDispatcher.dispatch().
        """
        return self._dispatcher.dispatch(policy, addresses, email_content, sms_content)

    def send_token(
        self,
        addresses: DeliveryAddressSet,
        token: str,
        email_template: Optional[EmailTemplate] = None,
        sms_message: Optional[str] = None,
        policy: Union[DeliveryPolicy, str, None] = None,
    ) -> DeliveryOutcome:
        """Deliver a security token using the configured templates.

        See TokenSender.send_token().
        """
        return self._token_sender.send_token(
            addresses,
            token,
            email_template=email_template,
            sms_message=sms_message,
            policy=policy,
        )

    @property
    def dispatcher(self) -> NotificationDispatcher:
        """Access underlying NotificationDispatcher instance."""
        return self._dispatcher

    @property
    def token_sender(self) -> TokenSender:
        """Access underlying TokenSender instance."""
        return self._token_sender
