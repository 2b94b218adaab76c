"""Clock implementations."""

from doccatalog.clocks.local_clock import FixedClock, SystemClock

__all__ = ["SystemClock", "FixedClock"]
