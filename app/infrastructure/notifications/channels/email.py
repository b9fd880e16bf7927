"""In-process email queue implementing EmailSender."""

import threading
from dataclasses import dataclass
from typing import List, Optional

import structlog
from infrastructure.notifications.models import EmailContent

logger = structlog.get_logger()


@dataclass(frozen=True)
class QueuedEmail:
    """Email accepted by the queue."""

    to_address: str
    content: EmailContent


class InMemoryEmailQueue:
    """Thread-safe in-memory email queue.

    Accepts emails until ``capacity`` is reached; a delivery worker (out of
    scope here) drains it with ``drain()``. Suitable for single-instance
    deployments, development and tests.
    """

    def __init__(self, capacity: Optional[int] = None):
        """Initialize the queue.

        Args:
            capacity: Maximum queued emails, unbounded when None.
        """
        self._items: List[QueuedEmail] = []
        self._lock = threading.Lock()
        self.capacity = capacity

    def send_email(self, address: str, content: EmailContent) -> bool:
        """Enqueue an email. Returns False when the queue is full."""
        with self._lock:
            if self.capacity is not None and len(self._items) >= self.capacity:
                logger.warning(
                    "email_queue_full",
                    address=address,
                    capacity=self.capacity,
                )
                return False
            self._items.append(QueuedEmail(to_address=address, content=content))
            size = len(self._items)

        logger.debug("email_enqueued", address=address, queue_size=size)
        return True

    def items(self) -> List[QueuedEmail]:
        """Snapshot of queued emails in submission order."""
        with self._lock:
            return list(self._items)

    def drain(self) -> List[QueuedEmail]:
        """Remove and return all queued emails."""
        with self._lock:
            items, self._items = self._items, []
        return items

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
