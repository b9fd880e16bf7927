"""In-process destination marker and statistics counter.

Thread-safe implementations of DestinationMarker and StatisticsCounter for
single-instance deployments, development and tests.
"""

import threading
from collections import Counter
from typing import Dict, Tuple

import structlog
from infrastructure.notifications.models import DestinationRecordType

logger = structlog.get_logger()


class InMemoryDestinationMarker:
    """Counts how often each destination was targeted.

    Attributes:
        max_marks: Optional per-destination threshold; a warning is logged
            each time a destination goes over it.
    """

    def __init__(self, max_marks: int | None = None):
        self._marks: Counter = Counter()
        self._lock = threading.Lock()
        self.max_marks = max_marks

    def mark(self, record_type: DestinationRecordType, destination: str) -> None:
        key = (DestinationRecordType(record_type), destination)
        with self._lock:
            self._marks[key] += 1
            count = self._marks[key]

        if self.max_marks is not None and count > self.max_marks:
            logger.warning(
                "destination_mark_threshold_exceeded",
                record_type=key[0].value,
                destination=destination,
                count=count,
                max_marks=self.max_marks,
            )

    def count(self, record_type: DestinationRecordType, destination: str) -> int:
        with self._lock:
            return self._marks[(DestinationRecordType(record_type), destination)]

    def marks(self) -> Dict[Tuple[DestinationRecordType, str], int]:
        """Snapshot of mark counts keyed by (record_type, destination)."""
        with self._lock:
            return dict(self._marks)

    def clear(self) -> None:
        with self._lock:
            self._marks.clear()


class InMemoryStatistics:
    """Named counters."""

    def __init__(self):
        self._counters: Counter = Counter()
        self._lock = threading.Lock()

    def increment(self, name: str) -> None:
        with self._lock:
            self._counters[name] += 1

    def get(self, name: str) -> int:
        with self._lock:
            return self._counters[name]

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counters)
