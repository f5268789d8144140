"""Clock interface"""

from abc import ABC, abstractmethod


class Clock(ABC):
    """Interface for a monotonic time source"""

    @abstractmethod
    def now_ns(self) -> int:
        """Get the current monotonic instant in nanoseconds"""
        pass
