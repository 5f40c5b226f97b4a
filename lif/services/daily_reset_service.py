"""Daily reset sweep: un-tick yesterday's completions and lapse broken streaks.

The sweep runs on every tick and is idempotent. It never advances a streak;
it only clears state that belongs to an earlier logical day.
"""

import logging
from datetime import datetime

from lif.core.day_boundary import logical_day, most_recent_boundary, yesterday
from lif.domain.daily import DailyStatus, DailyTask
from lif.models.service_models import SweepResult


logger = logging.getLogger(__name__)


def _is_stale_completion(task: DailyTask, boundary: datetime) -> bool:
    if task.status != DailyStatus.DONE:
        return False
    return task.last_completed is None or task.last_completed < boundary


def _has_lapsed(task: DailyTask, now: datetime) -> bool:
    reference = task.last_completed or task.streak_anchor
    if task.current_streak <= 0 or reference is None:
        return False
    day = logical_day(reference)
    return day not in (logical_day(now), yesterday(now))


def sweep(tasks: list[DailyTask], *, now: datetime) -> SweepResult:
    """Apply the daily reset rules to every task.

    A task completed before the most recent 03:00 boundary goes back to
    INCOMPLETE. Independently, a streak whose last counted completion is
    older than yesterday's logical day drops to zero.

    Args:
        tasks: Current daily tasks
        now: Tick time

    Returns:
        SweepResult with the new task list and the ids that were touched
    """
    boundary = most_recent_boundary(now)
    swept: list[DailyTask] = []
    reset_ids: list[int] = []
    lapsed_ids: list[int] = []

    for task in tasks:
        updates: dict[str, object] = {}

        # Both rules look at the task as it was before this sweep
        if _is_stale_completion(task, boundary):
            updates["status"] = DailyStatus.INCOMPLETE
            updates["last_completed"] = None
            reset_ids.append(task.id)

        if _has_lapsed(task, now):
            updates["current_streak"] = 0
            lapsed_ids.append(task.id)

        swept.append(task.model_copy(update=updates) if updates else task)

    changed = bool(reset_ids or lapsed_ids)
    if changed:
        logger.info(f"Daily reset at {now.isoformat()}: reset={reset_ids}, lapsed={lapsed_ids}")

    return SweepResult(tasks=swept, changed=changed, reset_ids=reset_ids, lapsed_ids=lapsed_ids)
