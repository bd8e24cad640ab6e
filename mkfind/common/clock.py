"""Clock interface for dependency injection."""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Clock interface for reading the current time."""

    @abstractmethod
    def now_ms(self) -> int:
        """Return the current time in epoch milliseconds."""


class SystemClock(Clock):
    """Real clock backed by the system time."""

    def now_ms(self) -> int:
        """Return the current time in epoch milliseconds."""
        return time.time_ns() // 1_000_000
