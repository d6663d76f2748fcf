import logging
import time
from typing import Callable, Optional


logger = logging.getLogger(__name__)


def log_func_time(func: Callable):
    def wrapper(*args, **kwargs):
        timer = Timer()
        res = func(*args, **kwargs)
        logger.debug(f"{func.__name__} took {timer.elapsed_ms()} ms")
        return res

    return wrapper


class Timer:
    def __init__(self, clock: Callable[[], int] = time.time_ns):
        self._clock = clock
        self.reset()

    def reset(self):
        self._time = self._clock()

    def elapsed_ms(self):
        elapsed = self._clock() - self._time
        elapsed = elapsed / 1e6
        return elapsed

    def elapsed_sec(self):
        elapsed = self._clock() - self._time
        elapsed = elapsed / 1e9
        return elapsed


class Ticker:
    """
    Fixed cadence tick source, independent of how often it is polled.

    `due()` returns True at most once per interval. Missed ticks are not
    replayed, the next deadline is rescheduled from the current time.
    """

    def __init__(
        self,
        interval_secs: Optional[float],
        clock: Callable[[], float] = time.monotonic,
    ):
        if interval_secs is not None and interval_secs <= 0:
            raise ValueError("Ticker interval must be greater than zero")
        self.interval_secs = interval_secs
        self._clock = clock
        self.reset()

    @property
    def enabled(self) -> bool:
        return self.interval_secs is not None

    def reset(self):
        self._last_tick = self._clock()

    def due(self) -> bool:
        if not self.enabled:
            return False

        now = self._clock()
        if now - self._last_tick < self.interval_secs:
            return False

        self._last_tick = now
        return True
