from __future__ import annotations

import math
from datetime import timedelta
from typing import Any, Callable, Union

DelayResult = Union[float, int, timedelta]
DelayFunction = Callable[[Any, float], DelayResult]


def to_seconds(value: DelayResult) -> float:
    """Normalise a delay function's return value to float seconds."""
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


def fixed_interval(transactions_per_second: float) -> float:
    """Return the spacing in seconds for a fixed TPS rate, truncated to whole milliseconds.

    Rates that are not strictly positive, or that are so small the interval
    overflows, yield 0.0 so the throttle never waits."""
    if not transactions_per_second > 0:
        return 0.0
    millis = 1000.0 / transactions_per_second
    if not math.isfinite(millis):
        return 0.0
    return math.floor(millis) / 1000.0


def constant_delay(seconds: float) -> DelayFunction:
    """Delay function that always asks for the same spacing."""
    def _delay(_argument: Any, _elapsed: float) -> float:
        return seconds

    return _delay


def backpressure_delay(normal_seconds: float, pressured_seconds: float) -> DelayFunction:
    """Delay function taking a bool argument: True while the downstream is pushing back."""

    def _delay(in_backpressure: bool, _elapsed: float) -> float:
        return pressured_seconds if in_backpressure else normal_seconds

    return _delay
