from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable

from .delay import DelayFunction, constant_delay, fixed_interval, to_seconds
from .models import Initialized, ThrottleState, Uninitialized

logger = logging.getLogger(__name__)

# Largest value time.sleep accepts on every platform
MAX_SLEEP_SECONDS = threading.TIMEOUT_MAX


class Throttle:
    """Blocking throttle that spaces out repeated calls to acquire().

    A delay function decides, from the caller's argument and the time elapsed
    since the previous acquisition, how long the gap between the two ought to
    be. acquire() sleeps the current thread for whatever is left of that gap.
    The first acquisition is always free.

    Not thread-safe: callers sharing one instance across threads must
    serialise access themselves."""

    def __init__(
        self,
        delay_function: DelayFunction,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        self._delay_function = delay_function
        self._clock = clock
        self._sleep = sleep
        self._state: ThrottleState = Uninitialized()

    @classmethod
    def from_delay_function(cls, delay_function: DelayFunction, **kwargs: Any) -> "Throttle":
        """Throttle whose spacing is decided by delay_function(argument, elapsed)."""
        return cls(delay_function, **kwargs)

    @classmethod
    def from_fixed_rate(cls, transactions_per_second: float, **kwargs: Any) -> "Throttle":
        """Throttle that never lets acquire() run faster than transactions_per_second."""
        return cls(constant_delay(fixed_interval(transactions_per_second)), **kwargs)

    def acquire(self, argument: Any = None) -> None:
        """Block until enough time has passed since the previous acquire().

        argument is passed through to the delay function unchanged."""
        state = self._state
        if isinstance(state, Uninitialized):
            logger.debug("first acquire, not waiting")
            self._state = Initialized(previous_invocation=self._clock())
            return

        elapsed = self._clock() - state.previous_invocation
        target = to_seconds(self._delay_function(argument, elapsed))
        # NaN fails both comparisons and falls through without sleeping
        if target > 0 and target > elapsed:
            extra = min(target - elapsed, MAX_SLEEP_SECONDS)
            logger.debug("throttling for %.3fs (target=%.3fs elapsed=%.3fs)", extra, target, elapsed)
            self._sleep(extra)

        self._state = Initialized(previous_invocation=self._clock())


tps_throttle = Throttle.from_fixed_rate
