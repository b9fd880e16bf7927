"""Test fixtures for notification infrastructure tests."""

import pytest
from unittest.mock import MagicMock, NonCallableMagicMock

from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.notifications.tracking import InMemoryStatistics


@pytest.fixture
def email_sender():
    """Mock EmailSender that succeeds by default."""
    sender = NonCallableMagicMock()
    sender.send_email.return_value = True
    return sender


@pytest.fixture
def sms_sender():
    """Mock SmsSender that succeeds by default."""
    sender = NonCallableMagicMock()
    sender.send_sms.return_value = True
    return sender


@pytest.fixture
def destination_marker():
    """Mock DestinationMarker."""
    return NonCallableMagicMock()


@pytest.fixture
def statistics():
    """In-memory statistics counter."""
    return InMemoryStatistics()


@pytest.fixture
def dispatcher(email_sender, sms_sender, destination_marker, statistics):
    """NotificationDispatcher wired with mock collaborators."""
    return NotificationDispatcher(
        email_sender=email_sender,
        sms_sender=sms_sender,
        destination_marker=destination_marker,
        statistics=statistics,
    )


@pytest.fixture
def call_log(email_sender, sms_sender, destination_marker):
    """Ordered record of marker and sender calls.

    Attaches all three mocks to one parent so ``call_log.mock_calls``
    reflects the interleaving of marks and sends.
    """
    parent = MagicMock()
    parent.attach_mock(email_sender, "email")
    parent.attach_mock(sms_sender, "sms")
    parent.attach_mock(destination_marker, "marker")
    return parent
