"""Reminder state machine and display helpers.

States: inactive -> active <-> paused, active -> expired. Every user-driven
transition returns a ``ReminderTransition``; rejected transitions leave the
reminder untouched and report a no-op outcome instead of raising.
"""

import logging
from datetime import datetime, timedelta

from lif.core.duration_formatter import format_clock, format_remaining
from lif.core.duration_parser import resolve_target
from lif.core.errors import Outcome, OutcomeCode
from lif.core.logging import span
from lif.domain.reminder import Reminder, ReminderStatus
from lif.models.service_models import ExpiryResult, ReminderFired, ReminderTransition


logger = logging.getLogger(__name__)

_ZERO = timedelta(0)


def _armed(reminder: Reminder, spec: str, now: datetime) -> ReminderTransition:
    """Parse ``spec`` and arm the reminder, or park it as inactive."""
    parsed = resolve_target(spec, now)
    if parsed is None:
        logger.info(f"Reminder {reminder.id} spec {spec!r} could not be parsed")
        updated = reminder.model_copy(
            update={
                "alarm_or_countdown": spec,
                "status": ReminderStatus.INACTIVE,
                "target_time": None,
                "notified": False,
                "paused_remaining": None,
            }
        )
        return ReminderTransition(
            reminder=updated,
            outcome=Outcome.failure(
                OutcomeCode.SPEC_UNPARSEABLE,
                f"Could not parse {spec!r} for {reminder.label!r}, please edit it",
            ),
        )

    updated = reminder.model_copy(
        update={
            "alarm_or_countdown": spec,
            "status": ReminderStatus.ACTIVE,
            "target_time": parsed.target_time,
            "is_countdown": parsed.is_countdown,
            "notified": False,
            "paused_remaining": None,
        }
    )
    return ReminderTransition(
        reminder=updated,
        outcome=Outcome.success(f"Reminder {reminder.label!r} set for {parsed.target_time.strftime('%H:%M')}"),
    )


def arm(reminder: Reminder, spec: str, *, now: datetime) -> ReminderTransition:
    """Store a new spec on the reminder and arm it from ``now``."""
    with span("reminder_service.arm"):
        return _armed(reminder, spec, now)


def start(reminder: Reminder, *, now: datetime) -> ReminderTransition:
    """Resume a paused reminder or arm an inactive one.

    Starting an active or expired reminder is a no-op; use ``reset`` to
    re-arm an expired reminder.
    """
    with span("reminder_service.start"):
        if reminder.status == ReminderStatus.PAUSED:
            banked = reminder.paused_remaining or _ZERO
            updated = reminder.model_copy(
                update={
                    "status": ReminderStatus.ACTIVE,
                    "target_time": now + banked,
                    "paused_remaining": None,
                    "notified": False,
                }
            )
            logger.info(f"Resumed reminder {reminder.id} with {format_clock(banked)} left")
            return ReminderTransition(
                reminder=updated,
                outcome=Outcome.success(f"Resumed reminder {reminder.label!r}"),
            )

        if reminder.status == ReminderStatus.INACTIVE:
            return _armed(reminder, reminder.alarm_or_countdown, now)

        if reminder.status == ReminderStatus.ACTIVE:
            return ReminderTransition(
                reminder=reminder,
                outcome=Outcome.noop(OutcomeCode.ALREADY_ACTIVE, f"Reminder {reminder.label!r} is already running"),
            )

        return ReminderTransition(
            reminder=reminder,
            outcome=Outcome.noop(
                OutcomeCode.ALREADY_EXPIRED,
                f"Reminder {reminder.label!r} has expired, reset it to start again",
            ),
        )


def pause(reminder: Reminder, *, now: datetime) -> ReminderTransition:
    """Freeze an active reminder, banking the time it had left."""
    with span("reminder_service.pause"):
        if reminder.status != ReminderStatus.ACTIVE or reminder.target_time is None:
            return ReminderTransition(
                reminder=reminder,
                outcome=Outcome.noop(OutcomeCode.NOT_ACTIVE, f"Reminder {reminder.label!r} is not running"),
            )

        banked = max(_ZERO, reminder.target_time - now)
        updated = reminder.model_copy(update={"status": ReminderStatus.PAUSED, "paused_remaining": banked})
        logger.info(f"Paused reminder {reminder.id} with {format_clock(banked)} left")
        return ReminderTransition(
            reminder=updated,
            outcome=Outcome.success(f"Paused reminder {reminder.label!r}"),
        )


def reset(reminder: Reminder, *, now: datetime) -> ReminderTransition:
    """Re-arm a reminder from its stored spec, whatever state it is in."""
    with span("reminder_service.reset"):
        return _armed(reminder, reminder.alarm_or_countdown, now)


def check_expiry(reminders: list[Reminder], *, now: datetime) -> ExpiryResult:
    """Expire every armed reminder whose target time has been reached.

    Each reminder fires at most once per arming: the ``notified`` flag is set
    in the same step that produces the event.

    Args:
        reminders: Current reminders
        now: Tick time

    Returns:
        ExpiryResult with the new reminder list and one event per fired reminder
    """
    checked: list[Reminder] = []
    fired: list[ReminderFired] = []

    for reminder in reminders:
        due = (
            reminder.status == ReminderStatus.ACTIVE
            and not reminder.notified
            and reminder.target_time is not None
            and now >= reminder.target_time
        )
        if not due:
            checked.append(reminder)
            continue

        checked.append(reminder.model_copy(update={"status": ReminderStatus.EXPIRED, "notified": True}))
        fired.append(
            ReminderFired(
                reminder_id=reminder.id,
                label=reminder.label,
                note=reminder.note,
                target_time=reminder.target_time,
                fired_at=now,
            )
        )
        logger.info(f"Reminder {reminder.id} ({reminder.label!r}) expired")

    return ExpiryResult(reminders=checked, fired=fired)


def rearm_unparsed(reminders: list[Reminder], *, now: datetime) -> list[Reminder]:
    """Arm reminders that were stored with a spec but no target time."""
    hydrated: list[Reminder] = []
    for reminder in reminders:
        if reminder.target_time is None and reminder.alarm_or_countdown:
            reminder = _armed(reminder, reminder.alarm_or_countdown, now).reminder
        hydrated.append(reminder)
    return hydrated


def remaining(reminder: Reminder, *, now: datetime) -> timedelta | None:
    """Time left before the reminder fires, or None when it is not armed.

    Paused reminders report their banked time; overdue reminders report zero.
    """
    if reminder.status == ReminderStatus.PAUSED:
        return reminder.paused_remaining or _ZERO
    if reminder.target_time is None:
        return None
    return max(_ZERO, reminder.target_time - now)


def time_label(reminder: Reminder, *, now: datetime) -> str:
    """Spec followed by its live state, e.g. "30m (29m59s)" or "1:50PM (13:50)"."""
    spec = reminder.alarm_or_countdown

    if reminder.status == ReminderStatus.PAUSED and reminder.paused_remaining:
        if reminder.is_countdown:
            return f"{spec} (PAUSED {format_clock(reminder.paused_remaining)})"
        return f"{spec} (PAUSED)"

    if reminder.target_time is None:
        return spec

    left = reminder.target_time - now
    if left <= _ZERO:
        return f"{spec} (EXPIRED)"
    if reminder.is_countdown:
        return f"{spec} ({format_clock(left)})"
    return f"{spec} ({reminder.target_time.strftime('%H:%M')})"


def countdown_label(reminder: Reminder, *, now: datetime) -> str:
    """Short state for the home view: "45m0s", "9 hours", "13:50", "PAUSED" or "EXPIRED"."""
    if reminder.status == ReminderStatus.PAUSED:
        if reminder.is_countdown and reminder.paused_remaining:
            return f"{format_remaining(reminder.paused_remaining)} (PAUSED)"
        return "PAUSED"

    if reminder.target_time is None:
        return ""

    left = reminder.target_time - now
    if left <= _ZERO:
        return "EXPIRED"
    if reminder.is_countdown:
        return format_remaining(left)
    return reminder.target_time.strftime("%H:%M")


def upcoming(reminders: list[Reminder], *, now: datetime) -> list[Reminder]:
    """Active and paused reminders, soonest first."""
    pending = [r for r in reminders if r.status in (ReminderStatus.ACTIVE, ReminderStatus.PAUSED)]
    return sorted(pending, key=lambda r: remaining(r, now=now) or _ZERO)
