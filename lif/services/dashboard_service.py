"""Collection-level dashboard operations over ``AppData``.

Every function takes the current data and returns a new copy together with a
user-facing outcome. Unknown ids are reported as NOT_FOUND outcomes and never
raise.
"""

import logging
from datetime import datetime, timedelta

from lif.core.config import Constants
from lif.core.errors import Outcome, OutcomeCode
from lif.core.logging import span
from lif.domain.app_data import AppData, RecordKind
from lif.domain.create_models import DailyCreate, ReminderCreate, TodoCreate
from lif.domain.daily import DailyStatus, DailyTask
from lif.domain.reminder import Reminder, ReminderAction, ReminderStatus
from lif.domain.todo import RollingTodo
from lif.models.service_models import DashboardResult, DashboardSummary, TickResult, UpcomingReminder
from lif.services import daily_reset_service, gamification_service, reminder_service, streak_service


logger = logging.getLogger(__name__)

_RECORD_FIELDS: dict[RecordKind, tuple[str, str]] = {
    RecordKind.DAILIES: ("dailies", "daily"),
    RecordKind.TODOS: ("rolling_todos", "todo"),
    RecordKind.REMINDERS: ("reminders", "reminder"),
}


def _next_id(records: list[DailyTask] | list[RollingTodo] | list[Reminder]) -> int:
    return max((record.id for record in records), default=0) + 1


def _not_found(data: AppData, kind: str, record_id: int) -> DashboardResult:
    return DashboardResult(
        data=data,
        outcome=Outcome.failure(OutcomeCode.NOT_FOUND, f"No {kind} with id {record_id}"),
        record_id=record_id,
        changed=False,
    )


def _index_of(records: list[DailyTask] | list[RollingTodo] | list[Reminder], record_id: int) -> int | None:
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return None


def run_tick(data: AppData, *, now: datetime) -> TickResult:
    """Run the daily reset sweep and the reminder expiry check.

    Args:
        data: Current dashboard data
        now: Tick time

    Returns:
        TickResult; ``changed`` is False when nothing needs persisting
    """
    swept = daily_reset_service.sweep(data.dailies, now=now)
    expiry = reminder_service.check_expiry(data.reminders, now=now)

    changed = swept.changed or bool(expiry.fired)
    if not changed:
        return TickResult(data=data, changed=False)

    updated = data.model_copy(update={"dailies": swept.tasks, "reminders": expiry.reminders})
    return TickResult(data=updated, changed=True, reset_occurred=bool(swept.reset_ids), fired=expiry.fired)


def open_session(data: AppData, *, now: datetime) -> DashboardResult:
    """Prepare freshly loaded data: re-arm stored reminders, sweep, login bonus."""
    with span("dashboard_service.open_session"):
        reminders = reminder_service.rearm_unparsed(data.reminders, now=now)
        swept = daily_reset_service.sweep(data.dailies, now=now)
        gamification, bonus_message = gamification_service.give_login_bonus(data.gamification, now=now)

        changed = reminders != data.reminders or swept.changed or bonus_message is not None
        updated = data.model_copy(
            update={"dailies": swept.tasks, "reminders": reminders, "gamification": gamification}
        )
        message = bonus_message or "Welcome back"
        return DashboardResult(data=updated, outcome=Outcome.success(message), changed=changed)


def toggle_daily(data: AppData, task_id: int, *, now: datetime) -> DashboardResult:
    """Complete or un-complete a daily task, with points and achievements."""
    with span("dashboard_service.toggle_daily"):
        index = _index_of(data.dailies, task_id)
        if index is None:
            return _not_found(data, "daily", task_id)

        task = data.dailies[index]
        dailies = list(data.dailies)

        if streak_service.is_done_today(task, now=now):
            dailies[index] = streak_service.revert_completion(task)
            gamification = gamification_service.deduct_completion(data.gamification)
            message = f"Task marked as INCOMPLETE (-{Constants.TASK_COMPLETION_POINTS} points)"
            updated = data.model_copy(update={"dailies": dailies, "gamification": gamification})
            return DashboardResult(data=updated, outcome=Outcome.success(message), record_id=task_id)

        completed = streak_service.apply_completion(task, now=now)
        dailies[index] = completed
        reward = gamification_service.on_completion(data.gamification, dailies, completed, now=now)

        if reward.unlocked:
            names = ", ".join(f"{a.icon} {a.name}" for a in reward.unlocked)
            message = (
                f"Achievement Unlocked: {names}! {reward.points_message} | "
                f"{completed.current_streak} day streak!"
            )
        else:
            message = f"Task marked as DONE! {reward.points_message} | {completed.current_streak} day streak!"

        updated = data.model_copy(update={"dailies": dailies, "gamification": reward.gamification})
        return DashboardResult(data=updated, outcome=Outcome.success(message), record_id=task_id)


def add_daily(data: AppData, payload: DailyCreate) -> DashboardResult:
    """Append a new INCOMPLETE daily task with no streak."""
    task = DailyTask(id=_next_id(data.dailies), **payload.model_dump())
    updated = data.model_copy(update={"dailies": [*data.dailies, task]})
    logger.info(f"Added daily {task.id}")
    return DashboardResult(data=updated, outcome=Outcome.success(f"Added daily {task.task!r}"), record_id=task.id)


def edit_daily(data: AppData, task_id: int, payload: DailyCreate) -> DashboardResult:
    """Replace the editable fields of a daily task; status and streaks are kept."""
    index = _index_of(data.dailies, task_id)
    if index is None:
        return _not_found(data, "daily", task_id)

    dailies = list(data.dailies)
    dailies[index] = dailies[index].model_copy(update=payload.model_dump())
    updated = data.model_copy(update={"dailies": dailies})
    return DashboardResult(data=updated, outcome=Outcome.success(f"Updated daily {task_id}"), record_id=task_id)


def add_todo(data: AppData, payload: TodoCreate) -> DashboardResult:
    todo = RollingTodo(id=_next_id(data.rolling_todos), **payload.model_dump())
    updated = data.model_copy(update={"rolling_todos": [*data.rolling_todos, todo]})
    logger.info(f"Added todo {todo.id}")
    return DashboardResult(data=updated, outcome=Outcome.success(f"Added todo {todo.task!r}"), record_id=todo.id)


def edit_todo(data: AppData, todo_id: int, payload: TodoCreate) -> DashboardResult:
    index = _index_of(data.rolling_todos, todo_id)
    if index is None:
        return _not_found(data, "todo", todo_id)

    todos = list(data.rolling_todos)
    todos[index] = todos[index].model_copy(update=payload.model_dump())
    updated = data.model_copy(update={"rolling_todos": todos})
    return DashboardResult(data=updated, outcome=Outcome.success(f"Updated todo {todo_id}"), record_id=todo_id)


def add_reminder(data: AppData, payload: ReminderCreate, *, now: datetime) -> DashboardResult:
    """Create a reminder and arm it from its spec.

    A spec that cannot be parsed still creates the reminder, left inactive.
    """
    with span("dashboard_service.add_reminder"):
        draft = Reminder(
            id=_next_id(data.reminders),
            reminder=payload.reminder,
            note=payload.note,
            created_at=now,
        )
        transition = reminder_service.arm(draft, payload.alarm_or_countdown, now=now)
        updated = data.model_copy(update={"reminders": [*data.reminders, transition.reminder]})
        return DashboardResult(data=updated, outcome=transition.outcome, record_id=draft.id)


def edit_reminder(data: AppData, reminder_id: int, payload: ReminderCreate, *, now: datetime) -> DashboardResult:
    """Replace label, note and spec of a reminder, then re-arm it."""
    with span("dashboard_service.edit_reminder"):
        index = _index_of(data.reminders, reminder_id)
        if index is None:
            return _not_found(data, "reminder", reminder_id)

        reminders = list(data.reminders)
        relabeled = reminders[index].model_copy(update={"reminder": payload.reminder, "note": payload.note})
        transition = reminder_service.arm(relabeled, payload.alarm_or_countdown, now=now)
        reminders[index] = transition.reminder
        updated = data.model_copy(update={"reminders": reminders})
        return DashboardResult(data=updated, outcome=transition.outcome, record_id=reminder_id)


def reminder_action(data: AppData, reminder_id: int, action: str, *, now: datetime) -> DashboardResult:
    """Apply a start, pause or reset transition to one reminder."""
    with span("dashboard_service.reminder_action"):
        try:
            requested = ReminderAction(action.strip().lower())
        except ValueError:
            return DashboardResult(
                data=data,
                outcome=Outcome.noop(OutcomeCode.UNKNOWN_ACTION, f"Unknown reminder action {action!r}"),
                record_id=reminder_id,
                changed=False,
            )

        index = _index_of(data.reminders, reminder_id)
        if index is None:
            return _not_found(data, "reminder", reminder_id)

        reminder = data.reminders[index]
        if requested == ReminderAction.START:
            transition = reminder_service.start(reminder, now=now)
        elif requested == ReminderAction.PAUSE:
            transition = reminder_service.pause(reminder, now=now)
        else:
            transition = reminder_service.reset(reminder, now=now)

        if transition.reminder == reminder:
            return DashboardResult(data=data, outcome=transition.outcome, record_id=reminder_id, changed=False)

        reminders = list(data.reminders)
        reminders[index] = transition.reminder
        updated = data.model_copy(update={"reminders": reminders})
        return DashboardResult(data=updated, outcome=transition.outcome, record_id=reminder_id)


def delete_record(data: AppData, kind: RecordKind, record_id: int) -> DashboardResult:
    """Remove a daily, todo or reminder by id."""
    field, noun = _RECORD_FIELDS[kind]
    records = getattr(data, field)

    index = _index_of(records, record_id)
    if index is None:
        return _not_found(data, noun, record_id)

    removed = records[index]
    name = removed.label if isinstance(removed, Reminder) else removed.task
    remaining = [record for record in records if record.id != record_id]
    updated = data.model_copy(update={field: remaining})
    logger.info(f"Deleted {kind.value} record {record_id}")
    return DashboardResult(data=updated, outcome=Outcome.success(f"Deleted: {name}"), record_id=record_id)


def summarize(data: AppData, *, now: datetime) -> DashboardSummary:
    """Build the home view: progress counters, upcoming and expired reminders."""
    state = data.gamification
    upcoming = [
        UpcomingReminder(
            id=reminder.id,
            label=reminder.label,
            status=reminder.status.value,
            countdown=reminder_service.countdown_label(reminder, now=now),
            remaining_seconds=(reminder_service.remaining(reminder, now=now) or timedelta(0)).total_seconds(),
        )
        for reminder in reminder_service.upcoming(data.reminders, now=now)
    ]

    return DashboardSummary(
        level=state.level,
        total_points=state.total_points,
        daily_streak=state.daily_streak,
        achievements_unlocked=sum(1 for a in state.achievements if a.unlocked),
        achievements_total=len(state.achievements),
        dailies_done=sum(1 for d in data.dailies if d.status == DailyStatus.DONE),
        dailies_total=len(data.dailies),
        rolling_todos=len(data.rolling_todos),
        upcoming=upcoming,
        expired=[r.label for r in data.reminders if r.status == ReminderStatus.EXPIRED],
    )
