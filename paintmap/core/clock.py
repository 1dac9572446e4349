"""
Microsecond clock and account id generation
"""
import threading
import time


class MicroClock:
    """
    Wall-clock microseconds, strictly increasing per instance

    Two calls in the same clock tick (or a clock stepping backwards) still
    return distinct, ordered values.
    """

    def __init__(self, source=time.time):
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            current = int(self._source() * 1_000_000)
            self._last = max(current, self._last + 1)
            return self._last


class IdGenerator:
    """Issues account ids as decimal strings of clock ticks"""

    def __init__(self, clock: MicroClock):
        self.clock = clock

    def __call__(self) -> str:
        return str(self.clock.now())
