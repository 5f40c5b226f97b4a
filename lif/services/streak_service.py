"""Pure streak bookkeeping for daily tasks."""

import logging
from datetime import datetime

from lif.core.day_boundary import logical_day, yesterday
from lif.core.logging import span
from lif.domain.daily import DailyStatus, DailyTask


logger = logging.getLogger(__name__)


def _streak_reference(task: DailyTask) -> datetime | None:
    """Most recent completion that counted towards the streak."""
    return task.last_completed or task.streak_anchor


def update_streak(task: DailyTask, *, now: datetime) -> DailyTask:
    """Recompute streak counters for a completion at ``now``.

    Status and timestamps are left as they are; only ``current_streak`` and
    ``best_streak`` change.

    Args:
        task: Daily task being completed
        now: Completion time

    Returns:
        Copy of the task with updated streak counters
    """
    previous = _streak_reference(task)
    today = logical_day(now)

    if previous is not None and logical_day(previous) == today:
        # Already counted this logical day
        current = task.current_streak
    elif previous is None:
        current = 1
    elif logical_day(previous) == yesterday(now):
        current = task.current_streak + 1
    else:
        current = 1

    return task.model_copy(
        update={
            "current_streak": current,
            "best_streak": max(task.best_streak, current),
        }
    )


def is_done_today(task: DailyTask, *, now: datetime) -> bool:
    """True if the task is DONE from a completion on ``now``'s logical day.

    A DONE task from an earlier logical day is stale: the daily reset has not
    swept it yet, so it counts as incomplete.
    """
    if task.status != DailyStatus.DONE or task.last_completed is None:
        return False
    return logical_day(task.last_completed) == logical_day(now)


def apply_completion(task: DailyTask, *, now: datetime) -> DailyTask:
    """Mark a daily task done and extend its streak.

    Completing a task that is already DONE today is a no-op.
    """
    if is_done_today(task, now=now):
        return task

    with span("streak_service.apply_completion"):
        previous = _streak_reference(task)
        counted = previous is None or logical_day(previous) != logical_day(now)

        updated = update_streak(task, now=now)
        fields: dict[str, object] = {"status": DailyStatus.DONE, "last_completed": now}
        if counted:
            fields["streak_anchor"] = now

        updated = updated.model_copy(update=fields)
        logger.info(
            f"Completed daily {task.id}, streak {task.current_streak} -> {updated.current_streak} "
            f"(best {updated.best_streak})"
        )
        return updated


def revert_completion(task: DailyTask) -> DailyTask:
    """Mark a daily task incomplete again.

    Streak counters and the streak anchor are kept, so re-completing later
    the same logical day does not double count.
    """
    if task.status != DailyStatus.DONE:
        return task

    with span("streak_service.revert_completion"):
        logger.info(f"Reverted completion of daily {task.id}")
        return task.model_copy(update={"status": DailyStatus.INCOMPLETE, "last_completed": None})


def toggle_completion(task: DailyTask, *, now: datetime) -> DailyTask:
    """Flip a daily task between DONE and INCOMPLETE; a stale DONE task is completed."""
    if is_done_today(task, now=now):
        return revert_completion(task)
    return apply_completion(task, now=now)
