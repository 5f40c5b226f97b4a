"""Logical day attribution with a 03:00 cutoff instead of midnight."""

from datetime import date, datetime, timedelta

from lif.core.config import Constants


def logical_day(moment: datetime, *, boundary_hour: int = Constants.DAY_BOUNDARY_HOUR) -> date:
    """Return the calendar date a timestamp counts towards.

    Times before the boundary hour belong to the previous calendar date, so
    01:30 on the 2nd is still "the 1st".

    Args:
        moment: Local timestamp (naive or timezone-aware)
        boundary_hour: Hour of day at which the logical day turns over

    Returns:
        Date label used only for equality and ordering
    """
    if moment.hour < boundary_hour:
        return (moment - timedelta(days=1)).date()
    return moment.date()


def yesterday(now: datetime, *, boundary_hour: int = Constants.DAY_BOUNDARY_HOUR) -> date:
    """Return the logical day of ``now - 24h``.

    This is deliberately not ``logical_day(now) - 1 day``: the comparison
    window rolls with the clock.
    """
    return logical_day(now - timedelta(hours=24), boundary_hour=boundary_hour)


def most_recent_boundary(now: datetime, *, boundary_hour: int = Constants.DAY_BOUNDARY_HOUR) -> datetime:
    """Return the latest day boundary that is not after ``now``.

    Args:
        now: Current local time
        boundary_hour: Hour of day at which the logical day turns over

    Returns:
        Today's boundary if it has already passed, otherwise yesterday's
    """
    todays_boundary = now.replace(hour=boundary_hour, minute=0, second=0, microsecond=0)
    if now < todays_boundary:
        return todays_boundary - timedelta(days=1)
    return todays_boundary
