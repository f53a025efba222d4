from .system_clock import SystemClock
from .fixed_clock import FixedClock

__all__ = ["SystemClock", "FixedClock"]
