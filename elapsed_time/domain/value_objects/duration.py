"""Duration value object"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Union

from elapsed_time.domain.value_objects.duration_components import DurationComponents

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLISECOND = 1_000_000
MILLIS_PER_SECOND = 1000


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative elapsed time with millisecond resolution"""

    seconds: int
    milliseconds: int = 0

    def __post_init__(self) -> None:
        """Validate duration"""
        if not isinstance(self.seconds, int) or not isinstance(self.milliseconds, int):
            raise ValueError("Duration fields must be whole numbers")
        if self.seconds < 0:
            raise ValueError("Duration cannot be negative")
        if not 0 <= self.milliseconds < MILLIS_PER_SECOND:
            raise ValueError("Milliseconds must be in the range 0-999")

    @classmethod
    def zero(cls) -> "Duration":
        """Create an empty duration"""
        return cls(0, 0)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Duration":
        """Create duration from milliseconds, clamping negatives to zero"""
        seconds, millis = divmod(max(0, int(milliseconds)), MILLIS_PER_SECOND)
        return cls(seconds, millis)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> "Duration":
        """Create duration from nanoseconds, truncating below one millisecond"""
        seconds, nanos = divmod(max(0, int(nanoseconds)), NANOS_PER_SECOND)
        return cls(seconds, nanos // NANOS_PER_MILLISECOND)

    @classmethod
    def from_seconds(cls, seconds: Union[int, float]) -> "Duration":
        """Create duration from seconds, rounded to the nearest millisecond"""
        if isinstance(seconds, int):
            return cls.from_milliseconds(seconds * MILLIS_PER_SECOND)
        if not seconds > 0:
            return cls.zero()
        return cls.from_milliseconds(round(seconds * MILLIS_PER_SECOND))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Create duration from a timedelta"""
        whole_seconds = delta.days * 86400 + delta.seconds
        return cls.from_milliseconds(whole_seconds * MILLIS_PER_SECOND + delta.microseconds // 1000)

    @property
    def total_milliseconds(self) -> int:
        """Get duration in whole milliseconds"""
        return self.seconds * MILLIS_PER_SECOND + self.milliseconds

    @property
    def total_seconds(self) -> float:
        """Get duration in seconds"""
        return self.total_milliseconds / 1000.0

    def components(self) -> DurationComponents:
        """Break the duration into weeks, days, hours, minutes and seconds"""
        return DurationComponents.from_duration(self)

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta"""
        return timedelta(seconds=self.seconds, milliseconds=self.milliseconds)

    def __add__(self, other: "Duration") -> "Duration":
        """Add two durations"""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_milliseconds(self.total_milliseconds + other.total_milliseconds)
