"""Notification dispatch exceptions.

Channel failures are reported as booleans and never raised; only the two
terminal conditions below surface to callers.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.notifications.models import DeliveryOutcome, DeliveryPolicy


class NotificationError(Exception):
    """Base exception for notification dispatch errors.

    Example:
        try:
            dispatcher.dispatch(policy, addresses, email, sms)
        except NotificationError as e:
            logger.error("notification_error", error=str(e))
    """

    pass


class InvalidPolicyError(NotificationError):
    """Raised when dispatch is asked to run with the NONE policy.

    This is a configuration error and must not be retried. Raised before
    any destination is marked or any sender is invoked.
    """

    def __init__(self, policy: "DeliveryPolicy"):
        self.policy = policy
        super().__init__(f"Delivery policy {policy.value} cannot be dispatched")


class NoViableChannelError(NotificationError):
    """Raised when no channel delivered the notification.

    Covers both failed sends and recipients without any usable destination.

    Attributes:
        outcome: DeliveryOutcome of the failed dispatch
    """

    def __init__(self, outcome: "DeliveryOutcome"):
        self.outcome = outcome
        super().__init__(
            f"No channel delivered the notification (policy={outcome.policy.value})"
        )
