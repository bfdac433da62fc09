from __future__ import annotations

import threading


class MissionCounter:
    """
    Monotonic mission sequence shared by every generation that uses it.

    ``next()`` is guarded by a lock so concurrent generators never hand out
    the same number.
    """

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError("Mission counter starts at 1 or above")
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Number the next successful generation will receive."""
        with self._lock:
            return self._next


_DEFAULT_COUNTER = MissionCounter()


def default_counter() -> MissionCounter:
    """Process-wide counter used by every generator that is not given its own."""
    return _DEFAULT_COUNTER
