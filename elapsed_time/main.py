"""Elapsed Time - measure a unit of work and render the duration

Module-level helpers share one stopwatch built from the environment settings:

    from elapsed_time.main import measure_and_format

    measure_and_format(lambda: time.sleep(1.5))  # e.g. "1.501s"
"""

from functools import lru_cache
from typing import Any, Awaitable, Callable, Optional

from elapsed_time.application.services.formatter import format_duration
from elapsed_time.application.services.stopwatch import Stopwatch
from elapsed_time.core.config import Settings, get_settings
from elapsed_time.core.logging import configure_logging
from elapsed_time.domain.interfaces.clock import Clock
from elapsed_time.domain.value_objects.duration import Duration
from elapsed_time.infrastructure.clocks.system_clock import get_clock

__all__ = [
    "Duration",
    "Stopwatch",
    "configure_logging",
    "create_stopwatch",
    "format_duration",
    "measure",
    "measure_and_format",
    "measure_async",
    "timed",
]


def create_stopwatch(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> Stopwatch:
    """Create and configure a stopwatch"""
    settings = settings or get_settings()
    return Stopwatch(
        clock=clock or get_clock(settings.clock),
        log_measurements=settings.log_measurements,
    )


@lru_cache
def get_stopwatch() -> Stopwatch:
    """Get the shared default stopwatch"""
    return create_stopwatch()


def measure(work: Callable[[], Any]) -> Duration:
    """Run work once and return the elapsed duration"""
    return get_stopwatch().measure(work)


async def measure_async(work: Callable[[], Awaitable[Any]]) -> Duration:
    """Await work once and return the elapsed duration"""
    return await get_stopwatch().measure_async(work)


def measure_and_format(work: Callable[[], Any]) -> str:
    """Run work once and return the formatted elapsed duration"""
    return get_stopwatch().measure_and_format(work)


def timed(label: Optional[str] = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging the elapsed time of every call"""
    return get_stopwatch().timed(label)
