"""Cooperative cancellation with an optional deadline."""

import threading
import time
from typing import Callable, Optional


class CancellationToken:
    """Cancellation signal shared between a poll loop and whoever may stop it.

    ``wait`` replaces an unconditional sleep: it returns early as soon as
    ``cancel`` is called from another thread or the deadline passes.
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._event = threading.Event()
        self._clock = clock
        self._deadline = clock() + timeout_seconds if timeout_seconds is not None else None

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def deadline_expired(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline

    @property
    def should_stop(self) -> bool:
        return self.cancelled or self.deadline_expired

    @property
    def reason(self) -> Optional[str]:
        if self.cancelled:
            return "cancelled"
        if self.deadline_expired:
            return "deadline expired"
        return None

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    def wait(self, seconds: float) -> bool:
        """Wait up to ``seconds``; return True if the caller should stop."""
        if self.should_stop:
            return True
        remaining = self.remaining()
        timeout = seconds if remaining is None else min(seconds, remaining)
        if self._event.wait(timeout):
            return True
        return self.deadline_expired
