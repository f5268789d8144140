"""Fixed-radix breakdown of a duration"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from elapsed_time.domain.value_objects.duration import Duration

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY


@dataclass(frozen=True)
class DurationComponents:
    """Duration split into non-overlapping units.

    Every unit below weeks holds only the remainder left by the next larger
    unit, so ``days < 7``, ``hours < 24`` and so on. Weeks are unbounded.
    """

    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @classmethod
    def from_duration(cls, duration: "Duration") -> "DurationComponents":
        """Decompose a duration largest unit first"""
        weeks, remainder = divmod(duration.seconds, SECONDS_PER_WEEK)
        days, remainder = divmod(remainder, SECONDS_PER_DAY)
        hours, remainder = divmod(remainder, SECONDS_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)

        return cls(
            weeks=weeks,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=duration.milliseconds,
        )

    def unit_chain(self) -> List[Tuple[int, str]]:
        """Units from weeks down to minutes with their labels"""
        return [
            (self.weeks, "w"),
            (self.days, "d"),
            (self.hours, "h"),
            (self.minutes, "m"),
        ]

    @property
    def leading_unit(self) -> Optional[str]:
        """Label of the largest non-zero unit of a minute or more"""
        for value, label in self.unit_chain():
            if value:
                return label
        return None

    @property
    def total_milliseconds(self) -> int:
        """Recombine the components into milliseconds"""
        total_seconds = (
            self.weeks * SECONDS_PER_WEEK
            + self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )
        return total_seconds * 1000 + self.milliseconds
