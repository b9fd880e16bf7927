"""Notification system core models.

Platform-agnostic models for policy-driven token delivery over email and SMS.

Uses Pydantic BaseModel for:
- Runtime input validation
- Immutable (frozen) per-call values
- Type safety with proper error messages
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DeliveryPolicy(str, Enum):
    """Which channels to attempt, and in what order.

    NONE must never be configured; dispatching with it is a configuration
    error. Unknown or legacy configuration values map to EMAIL_ONLY.
    """

    NONE = "NONE"
    BOTH = "BOTH"
    EMAIL_FIRST = "EMAILFIRST"
    SMS_FIRST = "SMSFIRST"
    SMS_ONLY = "SMSONLY"
    EMAIL_ONLY = "EMAILONLY"

    @classmethod
    def from_setting(cls, value: "Optional[str | DeliveryPolicy]") -> "DeliveryPolicy":
        """Parse a configured policy value.

        Matching ignores case, underscores, dashes and spaces, so
        "EMAILFIRST", "email_first" and "EmailFirst" are equivalent.

        Args:
            value: Configured policy string (or a DeliveryPolicy).

        Returns:
            Matching DeliveryPolicy, EMAIL_ONLY when unrecognized.
        """
        if isinstance(value, DeliveryPolicy):
            return value
        if not value:
            return cls.EMAIL_ONLY

        normalized = "".join(ch for ch in str(value).upper() if ch not in "_- ")
        for policy in cls:
            if policy.value == normalized:
                return policy
        return cls.EMAIL_ONLY


class DeliveryChannel(str, Enum):
    """Delivery medium."""

    EMAIL = "email"
    SMS = "sms"


class DestinationRecordType(str, Enum):
    """Record type passed to the destination marker."""

    TOKEN_DEST = "TOKEN_DEST"


class DeliveryAddressSet(BaseModel):
    """Destinations available for one recipient.

    Either, both or neither may be present. Blank values are stored as None;
    other values are kept as given.

    Attributes:
        email_address: Email address (optional)
        sms_number: SMS number (optional)
    """

    model_config = ConfigDict(frozen=True)

    email_address: Optional[str] = None
    sms_number: Optional[str] = None

    @field_validator("email_address", "sms_number")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Normalize empty or whitespace-only destinations to None."""
        if v is None or not v.strip():
            return None
        return v

    @property
    def has_email(self) -> bool:
        return self.email_address is not None

    @property
    def has_sms(self) -> bool:
        return self.sms_number is not None


class EmailContent(BaseModel):
    """Email message content.

    Attributes:
        subject: Subject line
        body_plain: Plain text body
        body_html: HTML body (may be empty)
        from_address: Sender address, None lets the email sender decide
    """

    model_config = ConfigDict(frozen=True)

    subject: str
    body_plain: str
    body_html: str = ""
    from_address: Optional[str] = None


class SmsContent(BaseModel):
    """SMS message content.

    Attributes:
        message: Message text
        sender_id: Sender id shown to the recipient (may be empty)
        max_length: Maximum text length accepted by the SMS sender
    """

    model_config = ConfigDict(frozen=True)

    message: str
    sender_id: str = ""
    max_length: int = Field(default=160, gt=0)


class DeliveryOutcome(BaseModel):
    """Result of one dispatch call. Never mutated after creation.

    A channel counts as attempted only when its destination was present,
    that is when the destination was marked and the sender invoked.

    Attributes:
        policy: Policy the dispatch ran with
        email_attempted: Email sender was invoked
        email_succeeded: Email sender reported success
        sms_attempted: SMS sender was invoked
        sms_succeeded: SMS sender reported success
        success: Overall success (any attempted channel succeeded)
    """

    model_config = ConfigDict(frozen=True)

    policy: DeliveryPolicy
    email_attempted: bool = False
    email_succeeded: bool = False
    sms_attempted: bool = False
    sms_succeeded: bool = False
    success: bool = False

    @property
    def channels_succeeded(self) -> List[DeliveryChannel]:
        """Channels that reported success, email first."""
        channels = []
        if self.email_succeeded:
            channels.append(DeliveryChannel.EMAIL)
        if self.sms_succeeded:
            channels.append(DeliveryChannel.SMS)
        return channels
