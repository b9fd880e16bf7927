"""Unit tests for notification models."""

import pytest
from pydantic import ValidationError

from infrastructure.notifications.errors import (
    InvalidPolicyError,
    NoViableChannelError,
    NotificationError,
)
from infrastructure.notifications.models import (
    DeliveryAddressSet,
    DeliveryChannel,
    DeliveryOutcome,
    DeliveryPolicy,
    SmsContent,
)


@pytest.mark.unit
class TestDeliveryPolicy:
    """Tests for DeliveryPolicy.from_setting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("BOTH", DeliveryPolicy.BOTH),
            ("EMAILFIRST", DeliveryPolicy.EMAIL_FIRST),
            ("email_first", DeliveryPolicy.EMAIL_FIRST),
            ("SmsFirst", DeliveryPolicy.SMS_FIRST),
            ("sms-only", DeliveryPolicy.SMS_ONLY),
            ("EMAILONLY", DeliveryPolicy.EMAIL_ONLY),
            ("NONE", DeliveryPolicy.NONE),
        ],
    )
    def test_recognized_values(self, value, expected):
        assert DeliveryPolicy.from_setting(value) is expected

    @pytest.mark.parametrize("value", [None, "", "CARRIER_PIGEON"])
    def test_unrecognized_values_default_to_email_only(self, value):
        assert DeliveryPolicy.from_setting(value) is DeliveryPolicy.EMAIL_ONLY

    def test_enum_passthrough(self):
        assert DeliveryPolicy.from_setting(DeliveryPolicy.BOTH) is DeliveryPolicy.BOTH


@pytest.mark.unit
class TestDeliveryAddressSet:
    """Tests for DeliveryAddressSet."""

    def test_blank_values_become_none(self):
        addresses = DeliveryAddressSet(email_address="  ", sms_number="")

        assert addresses.email_address is None
        assert addresses.sms_number is None
        assert not addresses.has_email
        assert not addresses.has_sms

    def test_present_values_are_kept_as_given(self):
        addresses = DeliveryAddressSet(email_address=" user@example.com ")

        assert addresses.email_address == " user@example.com "
        assert addresses.has_email
        assert not addresses.has_sms

    def test_is_frozen(self):
        addresses = DeliveryAddressSet(email_address="user@example.com")

        with pytest.raises(ValidationError):
            addresses.email_address = "other@example.com"


@pytest.mark.unit
class TestContentModels:
    """Tests for message content models."""

    def test_sms_max_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            SmsContent(message="hi", max_length=0)

    def test_sms_defaults(self):
        content = SmsContent(message="hi")

        assert content.sender_id == ""
        assert content.max_length == 160


@pytest.mark.unit
class TestDeliveryOutcome:
    """Tests for DeliveryOutcome."""

    def test_channels_succeeded_order(self):
        outcome = DeliveryOutcome(
            policy=DeliveryPolicy.BOTH,
            email_attempted=True,
            email_succeeded=True,
            sms_attempted=True,
            sms_succeeded=True,
            success=True,
        )

        assert outcome.channels_succeeded == [DeliveryChannel.EMAIL, DeliveryChannel.SMS]

    def test_defaults(self):
        outcome = DeliveryOutcome(policy=DeliveryPolicy.SMS_ONLY)

        assert outcome.channels_succeeded == []
        assert not outcome.success


@pytest.mark.unit
class TestErrors:
    """Tests for notification exceptions."""

    def test_invalid_policy_error(self):
        error = InvalidPolicyError(DeliveryPolicy.NONE)

        assert isinstance(error, NotificationError)
        assert error.policy is DeliveryPolicy.NONE
        assert "NONE" in str(error)

    def test_no_viable_channel_error_carries_outcome(self):
        outcome = DeliveryOutcome(policy=DeliveryPolicy.SMS_ONLY)
        error = NoViableChannelError(outcome)

        assert isinstance(error, NotificationError)
        assert error.outcome is outcome
        assert "SMSONLY" in str(error)
