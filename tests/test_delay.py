"""Tests for the delay helpers."""

import math
import unittest
from datetime import timedelta

from throttle.delay import backpressure_delay, constant_delay, fixed_interval, to_seconds


class TestFixedInterval(unittest.TestCase):
    """Verify TPS to interval conversion."""

    def test_whole_millisecond_rates(self):
        """Rates dividing 1000 evenly give exact intervals."""
        self.assertEqual(fixed_interval(10.0), 0.1)
        self.assertEqual(fixed_interval(1.0), 1.0)
        self.assertEqual(fixed_interval(0.5), 2.0)

    def test_truncates_fractional_milliseconds(self):
        """Fractional milliseconds are dropped, not rounded."""
        self.assertEqual(fixed_interval(3.0), 0.333)
        self.assertEqual(fixed_interval(1500.0), 0.0)

    def test_degenerate_rates_give_zero(self):
        """Zero, negative, NaN and overflowing rates mean no delay."""
        for tps in (0.0, -1.0, float("-inf"), float("nan"), 1e-320):
            self.assertEqual(fixed_interval(tps), 0.0, msg=repr(tps))

    def test_tiny_positive_rate_stays_finite(self):
        """A tiny but representable interval is kept as is rather than zeroed."""
        interval = fixed_interval(1e-300)
        self.assertTrue(math.isfinite(interval))
        self.assertGreater(interval, 1e299)

    def test_infinite_rate_gives_zero(self):
        """An infinite rate has no spacing at all."""
        self.assertEqual(fixed_interval(float("inf")), 0.0)


class TestDelayFunctions(unittest.TestCase):
    """Verify the ready-made delay functions."""

    def test_constant_delay_ignores_inputs(self):
        """constant_delay returns the same value for any argument or elapsed time."""
        delay = constant_delay(0.75)
        self.assertEqual(delay(None, 0.0), 0.75)
        self.assertEqual(delay("anything", 42.0), 0.75)

    def test_backpressure_delay(self):
        """The pressured interval applies only when the argument is true."""
        delay = backpressure_delay(1.0, 3.0)
        self.assertEqual(delay(False, 0.0), 1.0)
        self.assertEqual(delay(True, 0.0), 3.0)

    def test_to_seconds(self):
        """Numbers pass through, timedeltas are converted."""
        self.assertEqual(to_seconds(2), 2.0)
        self.assertEqual(to_seconds(0.5), 0.5)
        self.assertEqual(to_seconds(timedelta(milliseconds=1500)), 1.5)


if __name__ == "__main__":
    unittest.main()
