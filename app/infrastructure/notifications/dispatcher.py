"""Notification dispatcher with policy-driven email/SMS delivery.

Executes a DeliveryPolicy's attempt sequence:

| Policy      | Behavior                                              |
|-------------|-------------------------------------------------------|
| NONE        | InvalidPolicyError before any attempt                 |
| BOTH        | email and SMS always attempted, success if either     |
| EMAIL_FIRST | email, then SMS only if email did not succeed         |
| SMS_FIRST   | SMS, then email only if SMS did not succeed           |
| SMS_ONLY    | SMS only                                              |
| EMAIL_ONLY  | email only (also used for unrecognized policy values) |

Usage Example:
    from infrastructure.notifications import (
        NotificationDispatcher,
        DeliveryAddressSet,
        DeliveryPolicy,
        EmailContent,
        SmsContent,
    )

    dispatcher = NotificationDispatcher(
        email_sender=email_queue,
        sms_sender=sms_queue,
        destination_marker=marker,
        statistics=stats,
    )

    outcome = dispatcher.dispatch(
        DeliveryPolicy.EMAIL_FIRST,
        DeliveryAddressSet(email_address="user@example.com", sms_number="+15551234567"),
        EmailContent(subject="Code", body_plain="Your code is 1234"),
        SmsContent(message="Your code is 1234"),
    )
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

import structlog
from infrastructure.logging import bind_dispatch_context
from infrastructure.notifications.channels.base import (
    StatisticsCounter,
    as_destination_marker,
    as_email_sender,
    as_sms_sender,
)
from infrastructure.notifications.errors import (
    InvalidPolicyError,
    NoViableChannelError,
)
from infrastructure.notifications.models import (
    DeliveryAddressSet,
    DeliveryChannel,
    DeliveryOutcome,
    DeliveryPolicy,
    DestinationRecordType,
    EmailContent,
    SmsContent,
)

logger = structlog.get_logger()


class NotificationDispatcher:
    """Policy-driven email/SMS dispatcher.

    Holds no state across calls; collaborators are injected and must be
    safe for concurrent use when the dispatcher is shared between threads.

    Attributes:
        email_sender: EmailSender (or ``(address, content) -> bool`` callable)
        sms_sender: SmsSender (or ``(number, content) -> bool`` callable)
        destination_marker: DestinationMarker (or callable) called before
            every attempt
        statistics: Optional StatisticsCounter incremented on success
        success_statistic: Counter name incremented on success
        parallel_both: Run the two BOTH attempts concurrently

    Example:
        dispatcher = NotificationDispatcher(
            email_sender=InMemoryEmailQueue(),
            sms_sender=InMemorySmsQueue(),
            destination_marker=InMemoryDestinationMarker(),
        )
    """

    def __init__(
        self,
        email_sender,
        sms_sender,
        destination_marker,
        statistics: Optional[StatisticsCounter] = None,
        success_statistic: str = "RECOVERY_TOKENS_SENT",
        parallel_both: bool = False,
    ):
        """Initialize notification dispatcher.

        Args:
            email_sender: Email channel collaborator.
            sms_sender: SMS channel collaborator.
            destination_marker: Rate-limiting/intrusion marker.
            statistics: Optional statistics counter.
            success_statistic: Counter name for successful dispatches.
            parallel_both: Issue BOTH attempts concurrently.
        """
        self.email_sender = as_email_sender(email_sender)
        self.sms_sender = as_sms_sender(sms_sender)
        self.destination_marker = as_destination_marker(destination_marker)
        self.statistics = statistics
        self.success_statistic = success_statistic
        self.parallel_both = parallel_both

    def dispatch(
        self,
        policy: Union[DeliveryPolicy, str, None],
        addresses: DeliveryAddressSet,
        email_content: EmailContent,
        sms_content: SmsContent,
    ) -> DeliveryOutcome:
        """Deliver through the channels selected by ``policy``.

        Args:
            policy: DeliveryPolicy, or a raw configured policy string.
            addresses: Destinations available for the recipient.
            email_content: Content for the email channel.
            sms_content: Content for the SMS channel.

        Returns:
            DeliveryOutcome with per-channel flags; ``success`` is always True.

        Raises:
            InvalidPolicyError: If policy is NONE. Nothing is marked or sent.
            NoViableChannelError: If no attempted channel succeeded.
        """
        policy = DeliveryPolicy.from_setting(policy)

        with bind_dispatch_context(policy=policy.value):
            if policy is DeliveryPolicy.NONE:
                logger.error("notification_dispatch_invalid_policy")
                raise InvalidPolicyError(policy)

            logger.debug(
                "notification_dispatch_started",
                has_email=addresses.has_email,
                has_sms=addresses.has_sms,
            )

            email_ok: Optional[bool] = None
            sms_ok: Optional[bool] = None

            match policy:
                case DeliveryPolicy.BOTH:
                    email_ok, sms_ok = self._attempt_both(
                        addresses, email_content, sms_content
                    )
                case DeliveryPolicy.EMAIL_FIRST:
                    email_ok = self.try_send_email(
                        addresses.email_address, email_content
                    )
                    if not email_ok:
                        sms_ok = self.try_send_sms(addresses.sms_number, sms_content)
                case DeliveryPolicy.SMS_FIRST:
                    sms_ok = self.try_send_sms(addresses.sms_number, sms_content)
                    if not sms_ok:
                        email_ok = self.try_send_email(
                            addresses.email_address, email_content
                        )
                case DeliveryPolicy.SMS_ONLY:
                    sms_ok = self.try_send_sms(addresses.sms_number, sms_content)
                case _:
                    email_ok = self.try_send_email(
                        addresses.email_address, email_content
                    )

            outcome = DeliveryOutcome(
                policy=policy,
                email_attempted=email_ok is not None and addresses.has_email,
                email_succeeded=bool(email_ok),
                sms_attempted=sms_ok is not None and addresses.has_sms,
                sms_succeeded=bool(sms_ok),
                success=bool(email_ok) or bool(sms_ok),
            )

            if not outcome.success:
                logger.warning(
                    "notification_dispatch_failed",
                    email_attempted=outcome.email_attempted,
                    sms_attempted=outcome.sms_attempted,
                )
                raise NoViableChannelError(outcome)

            logger.info(
                "notification_dispatched",
                channels=[channel.value for channel in outcome.channels_succeeded],
            )
            self._record_success()
            return outcome

    def try_send_email(self, address: Optional[str], content: EmailContent) -> bool:
        """Attempt the email channel.

        Returns False without side effects when ``address`` is missing or
        empty. Otherwise the address is marked, then the sender is invoked.
        A marker failure fails the attempt and the sender is not invoked.

        Args:
            address: Email address.
            content: Email content.

        Returns:
            The sender's result; False if the marker or the sender raised.
        """
        if not address:
            logger.debug("notification_channel_skipped", channel="email")
            return False

        return self._mark_and_send(
            DeliveryChannel.EMAIL,
            address,
            lambda: self.email_sender.send_email(address, content),
        )

    def try_send_sms(self, number: Optional[str], content: SmsContent) -> bool:
        """Attempt the SMS channel.

        Returns False without side effects when ``number`` is missing or
        empty. Otherwise the number is marked, then the sender is invoked.
        A marker failure fails the attempt and the sender is not invoked.

        Args:
            number: SMS number.
            content: SMS content.

        Returns:
            The sender's result; False if the marker or the sender raised.
        """
        if not number:
            logger.debug("notification_channel_skipped", channel="sms")
            return False

        return self._mark_and_send(
            DeliveryChannel.SMS,
            number,
            lambda: self.sms_sender.send_sms(number, content),
        )

    def _attempt_both(
        self,
        addresses: DeliveryAddressSet,
        email_content: EmailContent,
        sms_content: SmsContent,
    ) -> tuple[bool, bool]:
        """Attempt email and SMS unconditionally."""
        if not self.parallel_both:
            email_ok = self.try_send_email(addresses.email_address, email_content)
            sms_ok = self.try_send_sms(addresses.sms_number, sms_content)
            return email_ok, sms_ok

        with ThreadPoolExecutor(max_workers=2) as executor:
            # Workers run in copies of the caller's context (bound log values)
            email_future = executor.submit(
                contextvars.copy_context().run,
                self.try_send_email,
                addresses.email_address,
                email_content,
            )
            sms_future = executor.submit(
                contextvars.copy_context().run,
                self.try_send_sms,
                addresses.sms_number,
                sms_content,
            )
            return email_future.result(), sms_future.result()

    def _mark_and_send(
        self, channel: DeliveryChannel, destination: str, send
    ) -> bool:
        """Mark the destination, then run the channel send.

        Marker and sender exceptions are absorbed into False.
        """
        try:
            self.destination_marker.mark(
                DestinationRecordType.TOKEN_DEST, destination
            )
            sent = bool(send())
        except Exception as e:
            logger.error(
                "notification_channel_failed",
                channel=channel.value,
                destination=destination,
                error=str(e),
                exc_info=True,
            )
            return False

        if not sent:
            logger.info(
                "notification_channel_failed",
                channel=channel.value,
                destination=destination,
            )
        return sent

    def _record_success(self) -> None:
        """Increment the success counter; failures are logged and ignored."""
        if self.statistics is None:
            return
        try:
            self.statistics.increment(self.success_statistic)
        except Exception as e:
            logger.warning(
                "notification_statistic_failed",
                statistic=self.success_statistic,
                error=str(e),
            )
