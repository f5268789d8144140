"""Tests for the stopwatch service"""

import asyncio
import logging
import threading
import time
from typing import List

import pytest

from elapsed_time.application.services.stopwatch import Stopwatch
from elapsed_time.domain.value_objects.duration import Duration
from elapsed_time.infrastructure.clocks.system_clock import PerfCounterClock
from tests.fakes import FakeClock


def test_measure_returns_elapsed_between_instants() -> None:
    """Test elapsed time is end minus start"""
    clock = FakeClock([5_000_000_000, 6_500_000_000])
    stopwatch = Stopwatch(clock)

    assert stopwatch.measure(lambda: None) == Duration(1, 500)
    assert clock.calls == 2


def test_measure_calls_work_once_between_readings(fake_clock: FakeClock) -> None:
    """Test work runs exactly once, after the start reading"""
    calls: List[int] = []

    def work() -> None:
        calls.append(fake_clock.calls)
        fake_clock.advance(90_061_000_000_000)

    duration = Stopwatch(fake_clock).measure(work)

    assert calls == [1]
    assert duration == Duration(90061, 0)


def test_measure_clamps_backwards_clock() -> None:
    """Test an end instant before the start yields zero"""
    stopwatch = Stopwatch(FakeClock([10_000_000, 4_000_000]))

    assert stopwatch.measure(lambda: None) == Duration.zero()


def test_measure_propagates_failure(fake_clock: FakeClock) -> None:
    """Test errors raised by work reach the caller unchanged"""
    error = RuntimeError("boom")

    def work() -> None:
        raise error

    with pytest.raises(RuntimeError) as excinfo:
        Stopwatch(fake_clock).measure(work)

    assert excinfo.value is error
    assert fake_clock.calls == 1


def test_measure_and_format() -> None:
    """Test convenience formatting of a measurement"""
    stopwatch = Stopwatch(FakeClock([0, 3_600_000_000_000]))

    assert stopwatch.measure_and_format(lambda: None) == "1h 0m 0.000s"


def test_measure_real_sleep() -> None:
    """Test a real sleep is measured at least as long as requested"""
    duration = Stopwatch(PerfCounterClock()).measure(lambda: time.sleep(0.05))

    assert duration.total_milliseconds >= 50
    assert duration.total_milliseconds < 2000


def test_measure_from_several_threads() -> None:
    """Test one stopwatch can time work on independent threads"""
    stopwatch = Stopwatch(PerfCounterClock())
    results: List[Duration] = []
    lock = threading.Lock()

    def run() -> None:
        duration = stopwatch.measure(lambda: time.sleep(0.02))
        with lock:
            results.append(duration)

    threads = [threading.Thread(target=run) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 4
    assert all(duration.total_milliseconds >= 20 for duration in results)


@pytest.mark.asyncio
async def test_measure_async(fake_clock: FakeClock) -> None:
    """Test awaiting work is timed"""

    async def work() -> None:
        await asyncio.sleep(0)
        fake_clock.advance(61_000_000_000)

    assert await Stopwatch(fake_clock).measure_async(work) == Duration(61, 0)


@pytest.mark.asyncio
async def test_measure_async_propagates_failure(fake_clock: FakeClock) -> None:
    """Test errors from awaited work reach the caller"""

    async def work() -> None:
        raise ValueError("bad input")

    with pytest.raises(ValueError, match="bad input"):
        await Stopwatch(fake_clock).measure_async(work)


def test_measurement_logged_at_debug(fake_clock: FakeClock, caplog: pytest.LogCaptureFixture) -> None:
    """Test measurements are logged at DEBUG by default"""

    def load_data() -> None:
        fake_clock.advance(1_500_000_000)

    with caplog.at_level(logging.DEBUG, logger="elapsed_time"):
        Stopwatch(fake_clock).measure(load_data)

    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert "load_data took 1.500s" in record.getMessage()


def test_measurement_logged_at_info_when_enabled(fake_clock: FakeClock, caplog: pytest.LogCaptureFixture) -> None:
    """Test log_measurements raises the level to INFO"""
    with caplog.at_level(logging.INFO, logger="elapsed_time"):
        Stopwatch(fake_clock, log_measurements=True).measure(lambda: None)

    assert [record.levelno for record in caplog.records] == [logging.INFO]
    assert "took 0.000s" in caplog.records[0].getMessage()


def test_timed_decorator_returns_result(fake_clock: FakeClock, caplog: pytest.LogCaptureFixture) -> None:
    """Test timed keeps the return value and logs the duration"""
    stopwatch = Stopwatch(fake_clock)

    @stopwatch.timed("addition")
    def add(a: int, b: int) -> int:
        fake_clock.advance(60_001_000_000)
        return a + b

    with caplog.at_level(logging.INFO, logger="elapsed_time"):
        assert add(2, b=3) == 5

    assert add.__name__ == "add"
    assert "addition took 1m 0.001s" in caplog.records[-1].getMessage()


def test_timed_decorator_propagates_failure(fake_clock: FakeClock, caplog: pytest.LogCaptureFixture) -> None:
    """Test a failing call logs nothing and re-raises"""
    stopwatch = Stopwatch(fake_clock)

    @stopwatch.timed()
    def fail() -> None:
        raise KeyError("missing")

    with caplog.at_level(logging.DEBUG, logger="elapsed_time"):
        with pytest.raises(KeyError):
            fail()

    assert caplog.records == []


@pytest.mark.asyncio
async def test_timed_decorator_on_coroutine(fake_clock: FakeClock, caplog: pytest.LogCaptureFixture) -> None:
    """Test coroutine functions are timed until they complete"""
    stopwatch = Stopwatch(fake_clock)

    @stopwatch.timed()
    async def fetch() -> str:
        fake_clock.advance(2_000_000)
        return "done"

    with caplog.at_level(logging.INFO, logger="elapsed_time"):
        assert await fetch() == "done"

    assert "fetch took 0.002s" in caplog.records[-1].getMessage()
