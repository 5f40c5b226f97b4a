"""Countdown and alarm parsing for reminder specs."""

import re
from datetime import datetime, timedelta
from typing import NamedTuple


# Longest suffix first so "min" is never read as "m" + garbage
_COUNTDOWN_PATTERN = re.compile(r"^(\d+)(min|sec|hr|d|w|m|h|s)$", re.IGNORECASE | re.ASCII)

_COUNTDOWN_UNITS: dict[str, timedelta] = {
    "d": timedelta(days=1),
    "w": timedelta(weeks=1),
    "m": timedelta(minutes=1),
    "min": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "hr": timedelta(hours=1),
    "s": timedelta(seconds=1),
    "sec": timedelta(seconds=1),
}

_ALARM_12H_PATTERN = re.compile(r"^(\d{1,2}):(\d{2}) ?([ap]m)$", re.IGNORECASE | re.ASCII)
_ALARM_24H_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)


class ParsedSpec(NamedTuple):
    """Resolved reminder spec."""

    target_time: datetime
    is_countdown: bool


def parse_countdown(spec: str, now: datetime) -> tuple[datetime | None, bool]:
    """Parse a relative duration spec into an absolute target time.

    Supports:
    - Days: "1d", "20d"
    - Weeks: "2w"
    - Minutes: "30m", "30min"
    - Hours: "2h", "2hr"
    - Seconds: "45s", "45sec"

    Args:
        spec: Countdown string
        now: Reference time the countdown starts from

    Returns:
        Tuple of (target_time, ok); target_time is None when ok is False
    """
    match = _COUNTDOWN_PATTERN.match(spec.strip())
    if not match:
        return (None, False)

    amount = int(match.group(1))
    unit = _COUNTDOWN_UNITS[match.group(2).lower()]
    try:
        return (now + amount * unit, True)
    except OverflowError:
        return (None, False)


def _anchor_alarm(now: datetime, hour: int, minute: int) -> datetime:
    alarm = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if alarm < now:
        # Already passed today, so it means that time tomorrow
        alarm += timedelta(hours=24)
    return alarm


def parse_alarm_time(spec: str, now: datetime) -> tuple[datetime | None, bool]:
    """Parse a wall-clock time of day into the next occurrence of that time.

    Tries 12-hour formats first ("1:50PM", "1:50 PM", "1:50pm", "1:50 pm"),
    then 24-hour "15:04".

    Args:
        spec: Alarm string
        now: Reference time; the alarm is anchored to its calendar date

    Returns:
        Tuple of (target_time, ok); target_time is None when ok is False
    """
    text = spec.strip()

    match = _ALARM_12H_PATTERN.match(text)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2))
        if not 1 <= hour <= 12 or minute > 59:
            return (None, False)
        hour %= 12
        if match.group(3).lower() == "pm":
            hour += 12
        return (_anchor_alarm(now, hour, minute), True)

    match = _ALARM_24H_PATTERN.match(text)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2))
        if hour > 23 or minute > 59:
            return (None, False)
        return (_anchor_alarm(now, hour, minute), True)

    return (None, False)


def resolve_target(spec: str, now: datetime) -> ParsedSpec | None:
    """Resolve a reminder spec, trying countdown before alarm.

    Args:
        spec: Raw reminder spec as typed by the user
        now: Reference time

    Returns:
        ParsedSpec, or None if the spec matches neither format
    """
    target, ok = parse_countdown(spec, now)
    if ok and target is not None:
        return ParsedSpec(target_time=target, is_countdown=True)

    target, ok = parse_alarm_time(spec, now)
    if ok and target is not None:
        return ParsedSpec(target_time=target, is_countdown=False)

    return None
