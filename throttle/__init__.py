"""Simple blocking throttle for slowing down repeated code.

Use it to keep a polling loop, a network client or a render loop from
driving a downstream resource faster than it should be driven.

Key modules:
    throttle -- Throttle with its fixed-rate and variable-delay constructors
    delay    -- delay function contract and ready-made delay functions
    models   -- Uninitialized / Initialized throttle states
"""
from .delay import DelayFunction, backpressure_delay, constant_delay, fixed_interval
from .throttle import Throttle, tps_throttle

__all__ = [
    "DelayFunction",
    "Throttle",
    "backpressure_delay",
    "constant_delay",
    "fixed_interval",
    "tps_throttle",
]
