"""Clocks backed by the platform timers"""

import time
from typing import Dict, Type

from elapsed_time.domain.interfaces.clock import Clock


class PerfCounterClock(Clock):
    """Highest resolution monotonic clock available"""

    def now_ns(self) -> int:
        return time.perf_counter_ns()


class MonotonicClock(Clock):
    """System monotonic clock, unaffected by wall-clock adjustments"""

    def now_ns(self) -> int:
        return time.monotonic_ns()


CLOCKS: Dict[str, Type[Clock]] = {
    "perf_counter": PerfCounterClock,
    "monotonic": MonotonicClock,
}


def get_clock(name: str) -> Clock:
    """Create a clock by its configured name"""
    try:
        clock_class = CLOCKS[name]
    except KeyError:
        raise ValueError(f"Unknown clock: {name!r} (expected one of {', '.join(sorted(CLOCKS))})") from None
    return clock_class()
