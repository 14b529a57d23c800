"""Trailing-edge debounce timer polled by the host."""

from __future__ import annotations

import time
from typing import Callable, Optional

Clock = Callable[[], float]


class ResettableTimer:
    """Single pending deadline; every ``arm`` pushes it out again.

    The timer never fires on its own. Hosts call ``expired()`` (usually from an
    interval callback) and act when it returns ``True``.
    """

    def __init__(self, delay_ms: int, *, clock: Clock = time.monotonic) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self.delay_ms = delay_ms
        self._clock = clock
        self._deadline: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    def arm(self) -> None:
        self._deadline = self._clock() + self.delay_ms / 1000.0

    def cancel(self) -> None:
        self._deadline = None

    def remaining_ms(self) -> Optional[float]:
        if self._deadline is None:
            return None
        return max(0.0, (self._deadline - self._clock()) * 1000.0)

    def expired(self) -> bool:
        """Consume the deadline if it has passed."""

        if self._deadline is None or self._deadline > self._clock():
            return False
        self._deadline = None
        return True


__all__ = ["Clock", "ResettableTimer"]
