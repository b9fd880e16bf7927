"""Token delivery feature settings."""

from typing import TYPE_CHECKING

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings

if TYPE_CHECKING:
    from infrastructure.notifications.models import DeliveryPolicy


class NotificationSettings(FeatureSettings):
    """Token delivery configuration.

    Environment Variables:
        TOKEN_SEND_METHOD: Delivery policy (NONE, BOTH, EMAILFIRST, SMSFIRST,
            SMSONLY, EMAILONLY). Unknown values fall back to EMAILONLY.
        SMS_SENDER_ID: Sender id attached to outgoing SMS messages
        SMS_MAX_TEXT_LENGTH: Maximum SMS text length (default: 160)
        TOKEN_SMS_MESSAGE: SMS text, %TOKEN% is replaced by the token
        TOKEN_EMAIL_FROM: From address of token emails
        TOKEN_EMAIL_SUBJECT: Subject of token emails
        TOKEN_EMAIL_BODY_PLAIN: Plain text body, %TOKEN% is replaced
        TOKEN_EMAIL_BODY_HTML: HTML body, %TOKEN% is replaced
        NOTIFICATION_PARALLEL_BOTH: Run the two BOTH attempts concurrently
        NOTIFICATION_SUCCESS_STATISTIC: Counter incremented on delivery

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        policy = settings.notifications.token_send_policy
        sender_id = settings.notifications.SMS_SENDER_ID
        ```
    """

    TOKEN_SEND_METHOD: str = Field(default="EMAILONLY", alias="TOKEN_SEND_METHOD")
    SMS_SENDER_ID: str = Field(default="", alias="SMS_SENDER_ID")
    SMS_MAX_TEXT_LENGTH: int = Field(default=160, gt=0, alias="SMS_MAX_TEXT_LENGTH")
    TOKEN_SMS_MESSAGE: str = Field(
        default="Your security code is %TOKEN%", alias="TOKEN_SMS_MESSAGE"
    )
    TOKEN_EMAIL_FROM: str | None = Field(default=None, alias="TOKEN_EMAIL_FROM")
    TOKEN_EMAIL_SUBJECT: str = Field(
        default="Your security code", alias="TOKEN_EMAIL_SUBJECT"
    )
    TOKEN_EMAIL_BODY_PLAIN: str = Field(
        default="Your security code is %TOKEN%", alias="TOKEN_EMAIL_BODY_PLAIN"
    )
    TOKEN_EMAIL_BODY_HTML: str = Field(
        default="<p>Your security code is <b>%TOKEN%</b></p>",
        alias="TOKEN_EMAIL_BODY_HTML",
    )
    PARALLEL_BOTH: bool = Field(default=False, alias="NOTIFICATION_PARALLEL_BOTH")
    SUCCESS_STATISTIC: str = Field(
        default="RECOVERY_TOKENS_SENT", alias="NOTIFICATION_SUCCESS_STATISTIC"
    )

    @property
    def token_send_policy(self) -> "DeliveryPolicy":
        """TOKEN_SEND_METHOD parsed into a DeliveryPolicy."""
        from infrastructure.notifications.models import DeliveryPolicy

        return DeliveryPolicy.from_setting(self.TOKEN_SEND_METHOD)
