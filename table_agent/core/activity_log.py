"""Activity Log - bounded in-memory window of recent, timestamped activity lines.

Invariants:
    - Entries are "{iso_timestamp}: {message}", timestamps in UTC with a Z suffix
    - Holds at most `capacity` entries; oldest evicted first
    - stored_count is what the buffer holds now; lifetime_count never decreases
    - Every entry is mirrored to the console via the "table_agent.activity" logger
    - log() never raises
"""

import logging
import threading
from collections import deque
from collections.abc import Callable
from datetime import datetime, timezone

ACTIVITY_LOGGER_NAME = "table_agent.activity"
DEFAULT_CAPACITY = 100

console = logging.getLogger(ACTIVITY_LOGGER_NAME)


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ActivityLog:
    """Ring buffer of activity entries, safe for interleaved callers."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], datetime] | None = None,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._entries: deque[str] = deque(maxlen=capacity)
        self._lifetime = 0
        self._lock = threading.Lock()

    def log(self, message: str) -> None:
        """Record one entry and echo it to the console."""
        entry = f"{utc_timestamp(self._clock())}: {message}"
        with self._lock:
            self._entries.append(entry)
            self._lifetime += 1
        console.info(entry)

    def recent(self, n: int) -> list[str]:
        """Last n entries, oldest first."""
        if n <= 0:
            return []
        with self._lock:
            entries = list(self._entries)
        return entries[-n:]

    @property
    def stored_count(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def lifetime_count(self) -> int:
        with self._lock:
            return self._lifetime
