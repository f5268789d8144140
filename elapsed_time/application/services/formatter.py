"""Human-readable rendering of durations"""

from elapsed_time.domain.value_objects.duration import Duration
from elapsed_time.domain.value_objects.duration_components import DurationComponents


def format_seconds(seconds: int, milliseconds: int) -> str:
    """Render the trailing decimal-seconds token, e.g. ``5.006s``"""
    return f"{seconds}.{milliseconds:03d}s"


def format_components(components: DurationComponents) -> str:
    """Render decomposed units as a space separated string.

    Output starts at the largest non-zero unit among weeks, days, hours and
    minutes and lists every unit down to minutes, zeros included. Seconds
    always close the string with exactly three decimal places.
    """
    parts = []
    leading = components.leading_unit

    if leading is not None:
        emitting = False
        for value, label in components.unit_chain():
            emitting = emitting or label == leading
            if emitting:
                parts.append(f"{value}{label}")

    parts.append(format_seconds(components.seconds, components.milliseconds))
    return " ".join(parts)


def format_duration(duration: Duration) -> str:
    """Format a duration, e.g. ``1d 1h 1m 1.000s`` or ``45.500s``"""
    return format_components(duration.components())
