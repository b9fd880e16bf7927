"""Security token delivery.

Renders the configured token email and SMS templates and hands them to the
NotificationDispatcher under the configured delivery policy.
"""

from typing import TYPE_CHECKING, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict

from infrastructure.logging import bind_dispatch_context
from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.notifications.models import (
    DeliveryAddressSet,
    DeliveryOutcome,
    DeliveryPolicy,
    EmailContent,
    SmsContent,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

TOKEN_PLACEHOLDER = "%TOKEN%"


class EmailTemplate(BaseModel):
    """Token email template; bodies contain TOKEN_PLACEHOLDER.

    Attributes:
        subject: Subject line
        body_plain: Plain text body template
        body_html: HTML body template
        from_address: Sender address
    """

    model_config = ConfigDict(frozen=True)

    subject: str
    body_plain: str
    body_html: str = ""
    from_address: Optional[str] = None

    def render(self, token: str) -> EmailContent:
        """Substitute the token into both bodies."""
        return EmailContent(
            subject=self.subject,
            body_plain=self.body_plain.replace(TOKEN_PLACEHOLDER, token),
            body_html=self.body_html.replace(TOKEN_PLACEHOLDER, token),
            from_address=self.from_address,
        )


class TokenSender:
    """Sends a security token to a recipient by email and/or SMS.

    Attributes:
        dispatcher: NotificationDispatcher doing the delivery
        settings: Settings providing policy, templates and SMS limits
    """

    def __init__(self, dispatcher: NotificationDispatcher, settings: "Settings"):
        self.dispatcher = dispatcher
        self.settings = settings

    def default_email_template(self) -> EmailTemplate:
        """Token email template from settings.notifications."""
        config = self.settings.notifications
        return EmailTemplate(
            subject=config.TOKEN_EMAIL_SUBJECT,
            body_plain=config.TOKEN_EMAIL_BODY_PLAIN,
            body_html=config.TOKEN_EMAIL_BODY_HTML,
            from_address=config.TOKEN_EMAIL_FROM,
        )

    def send_token(
        self,
        addresses: DeliveryAddressSet,
        token: str,
        email_template: Optional[EmailTemplate] = None,
        sms_message: Optional[str] = None,
        policy: Union[DeliveryPolicy, str, None] = None,
    ) -> DeliveryOutcome:
        """Deliver ``token`` according to the delivery policy.

        Args:
            addresses: Recipient destinations.
            token: Token substituted for %TOKEN% in every template.
            email_template: Overrides the configured token email.
            sms_message: Overrides the configured SMS text.
            policy: Overrides settings.notifications.TOKEN_SEND_METHOD.

        Returns:
            DeliveryOutcome of the dispatch.

        Raises:
            InvalidPolicyError: If the effective policy is NONE.
            NoViableChannelError: If neither channel delivered the token.
        """
        config = self.settings.notifications
        effective_policy = (
            DeliveryPolicy.from_setting(policy)
            if policy is not None
            else config.token_send_policy
        )

        email_content = (email_template or self.default_email_template()).render(token)
        sms_content = SmsContent(
            message=(
                sms_message if sms_message is not None else config.TOKEN_SMS_MESSAGE
            ).replace(TOKEN_PLACEHOLDER, token),
            sender_id=config.SMS_SENDER_ID or "",
            max_length=config.SMS_MAX_TEXT_LENGTH,
        )

        with bind_dispatch_context():
            outcome = self.dispatcher.dispatch(
                effective_policy, addresses, email_content, sms_content
            )
            logger.info(
                "security_code_delivered",
                channels=[channel.value for channel in outcome.channels_succeeded],
            )
        return outcome
