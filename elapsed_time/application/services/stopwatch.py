"""Stopwatch service for timing units of work"""

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from elapsed_time.application.services.formatter import format_duration
from elapsed_time.domain.interfaces.clock import Clock
from elapsed_time.domain.value_objects.duration import Duration

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _describe(work: Callable[..., Any]) -> str:
    return getattr(work, "__qualname__", None) or repr(work)


class Stopwatch:
    """Measures how long a callable takes to run.

    The stopwatch keeps no per-measurement state, so one instance can be
    shared between threads. Failures raised by the work propagate untouched
    and no duration is reported for them.
    """

    def __init__(self, clock: Clock, log_measurements: bool = False):
        self.clock = clock
        self.log_measurements = log_measurements

    def _elapsed_since(self, start_ns: int) -> Duration:
        # Clock skew can put end before start; from_nanoseconds clamps to zero
        return Duration.from_nanoseconds(self.clock.now_ns() - start_ns)

    def _record(self, label: str, duration: Duration, level: Optional[int] = None) -> None:
        if level is None:
            level = logging.INFO if self.log_measurements else logging.DEBUG
        if logger.isEnabledFor(level):
            logger.log(level, f"{label} took {format_duration(duration)}")

    def measure(self, work: Callable[[], Any]) -> Duration:
        """Run work once and return how long it took"""
        start_ns = self.clock.now_ns()
        work()
        duration = self._elapsed_since(start_ns)

        self._record(_describe(work), duration)
        return duration

    async def measure_async(self, work: Callable[[], Awaitable[Any]]) -> Duration:
        """Await the awaitable returned by work and return how long it took"""
        start_ns = self.clock.now_ns()
        await work()
        duration = self._elapsed_since(start_ns)

        self._record(_describe(work), duration)
        return duration

    def measure_and_format(self, work: Callable[[], Any]) -> str:
        """Run work once and return the formatted elapsed time"""
        return format_duration(self.measure(work))

    def timed(self, label: Optional[str] = None) -> Callable[[F], F]:
        """Decorator that logs the elapsed time of every call.

        The wrapped function keeps its arguments and return value. Coroutine
        functions are timed until the coroutine completes.
        """

        def decorator(func: F) -> F:
            name = label or _describe(func)

            if inspect.iscoroutinefunction(func):

                @functools.wraps(func)
                async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                    start_ns = self.clock.now_ns()
                    result = await func(*args, **kwargs)
                    self._record(name, self._elapsed_since(start_ns), logging.INFO)
                    return result

                return async_wrapper  # type: ignore

            @functools.wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                start_ns = self.clock.now_ns()
                result = func(*args, **kwargs)
                self._record(name, self._elapsed_since(start_ns), logging.INFO)
                return result

            return wrapper  # type: ignore

        return decorator
