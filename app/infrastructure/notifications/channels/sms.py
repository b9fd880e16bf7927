"""In-process SMS queue implementing SmsSender."""

import threading
from dataclasses import dataclass
from typing import List, Optional

import structlog
from infrastructure.notifications.models import SmsContent

logger = structlog.get_logger()


@dataclass(frozen=True)
class QueuedSms:
    """SMS accepted by the queue, text already cut to max_length."""

    number: str
    sender_id: str
    message: str


class InMemorySmsQueue:
    """Thread-safe in-memory SMS queue.

    Message text longer than the content's ``max_length`` is truncated on
    submission.
    """

    def __init__(self, capacity: Optional[int] = None):
        """Initialize the queue.

        Args:
            capacity: Maximum queued messages, unbounded when None.
        """
        self._items: List[QueuedSms] = []
        self._lock = threading.Lock()
        self.capacity = capacity

    def send_sms(self, number: str, content: SmsContent) -> bool:
        """Enqueue an SMS. Returns False when the queue is full."""
        message = content.message
        if len(message) > content.max_length:
            logger.warning(
                "sms_message_truncated",
                number=number,
                original_length=len(message),
                max_length=content.max_length,
            )
            message = message[: content.max_length]

        with self._lock:
            if self.capacity is not None and len(self._items) >= self.capacity:
                logger.warning("sms_queue_full", number=number, capacity=self.capacity)
                return False
            self._items.append(
                QueuedSms(number=number, sender_id=content.sender_id, message=message)
            )
            size = len(self._items)

        logger.debug("sms_enqueued", number=number, queue_size=size)
        return True

    def items(self) -> List[QueuedSms]:
        """Snapshot of queued messages in submission order."""
        with self._lock:
            return list(self._items)

    def drain(self) -> List[QueuedSms]:
        """Remove and return all queued messages."""
        with self._lock:
            items, self._items = self._items, []
        return items

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
