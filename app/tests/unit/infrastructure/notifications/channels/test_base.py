"""Unit tests for collaborator adaptation."""

from unittest.mock import MagicMock, NonCallableMagicMock

import pytest

from infrastructure.notifications.channels.base import (
    CallableDestinationMarker,
    CallableEmailSender,
    CallableSmsSender,
    as_destination_marker,
    as_email_sender,
    as_sms_sender,
)
from infrastructure.notifications.channels.email import InMemoryEmailQueue
from infrastructure.notifications.models import DestinationRecordType
from tests.factories.notifications import make_email_content, make_sms_content


@pytest.mark.unit
class TestAdapters:
    """Tests for the as_* helpers."""

    def test_objects_with_method_are_returned_unchanged(self):
        queue = InMemoryEmailQueue()

        assert as_email_sender(queue) is queue

    def test_email_function_is_wrapped(self):
        func = MagicMock(return_value=1)

        sender = as_email_sender(func)

        assert isinstance(sender, CallableEmailSender)
        content = make_email_content()
        assert sender.send_email("user@example.com", content) is True
        func.assert_called_once_with("user@example.com", content)

    def test_sms_function_is_wrapped(self):
        def send(number, content):
            return None

        sender = as_sms_sender(send)

        assert isinstance(sender, CallableSmsSender)
        assert sender.send_sms("+15551234567", make_sms_content()) is False

    def test_marker_function_is_wrapped(self):
        marks = []

        marker = as_destination_marker(lambda record_type, dest: marks.append(dest))
        marker.mark(DestinationRecordType.TOKEN_DEST, "user@example.com")

        assert isinstance(marker, CallableDestinationMarker)
        assert marks == ["user@example.com"]

    def test_callable_with_dynamic_attributes_is_wrapped(self):
        """A callable whose attributes appear on access is used as a function."""

        class Relay:
            def __init__(self):
                self.calls = []

            def __call__(self, address, content):
                self.calls.append(address)
                return True

            def __getattr__(self, name):
                return lambda *args: False

        relay = Relay()
        sender = as_email_sender(relay)

        assert isinstance(sender, CallableEmailSender)
        assert sender.send_email("user@example.com", make_email_content()) is True
        assert relay.calls == ["user@example.com"]

    def test_non_callable_double_is_used_as_is(self):
        double = NonCallableMagicMock()

        assert as_sms_sender(double) is double
        assert as_destination_marker(double) is double

    @pytest.mark.parametrize(
        "adapt", [as_email_sender, as_sms_sender, as_destination_marker]
    )
    def test_rejects_unusable_values(self, adapt):
        with pytest.raises(TypeError):
            adapt("not a collaborator")
