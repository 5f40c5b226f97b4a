"""Human-readable rendering of remaining durations."""

from datetime import timedelta

from lif.core.config import Constants


_MICROSECONDS_PER_SECOND = 1_000_000
_MICROSECONDS_PER_HOUR = 3600 * _MICROSECONDS_PER_SECOND


def _total_microseconds(duration: timedelta) -> int:
    return (duration.days * 86400 + duration.seconds) * _MICROSECONDS_PER_SECOND + duration.microseconds


def format_clock(duration: timedelta) -> str:
    """Render a duration in compact clock form, truncated to whole seconds.

    Examples: "0s", "45s", "1m30s", "2h5m0s", "-10s".
    """
    total = _total_microseconds(duration)
    seconds = abs(total) // _MICROSECONDS_PER_SECOND
    sign = "-" if total < 0 and seconds else ""

    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def format_remaining(duration: timedelta) -> str:
    """Render remaining time for display.

    Durations up to 8 hours are shown precisely via ``format_clock``. Longer
    durations are rounded to the nearest hour first and only then split into
    days and hours, so 23h40m reads "1 day" rather than "23 hours".

    Args:
        duration: Remaining time

    Returns:
        Display string such as "45m0s", "9 hours", "1 day 1h", "2d 3h", "2 days"
    """
    total = _total_microseconds(duration)
    if total <= Constants.PRECISE_FORMAT_MAX_HOURS * _MICROSECONDS_PER_HOUR:
        return format_clock(duration)

    rounded_hours = (total + _MICROSECONDS_PER_HOUR // 2) // _MICROSECONDS_PER_HOUR

    if rounded_hours >= 24:
        days, hours = divmod(rounded_hours, 24)
        if hours == 0:
            return "1 day" if days == 1 else f"{days} days"
        if days == 1:
            return f"1 day {hours}h"
        return f"{days}d {hours}h"

    if rounded_hours == 1:
        return "1 hour"
    return f"{rounded_hours} hours"
