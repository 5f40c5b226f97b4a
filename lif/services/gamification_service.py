"""Points, levels, achievements and the dashboard-wide activity streak."""

import logging
from datetime import datetime

from lif.core.config import Constants
from lif.core.day_boundary import logical_day, yesterday
from lif.core.logging import span
from lif.domain.daily import DailyTask
from lif.domain.gamification import Achievement, GamificationState
from lif.models.service_models import CompletionReward


logger = logging.getLogger(__name__)


def calculate_level(points: int) -> int:
    """Level up every POINTS_PER_LEVEL points, starting at level 1."""
    return points // Constants.POINTS_PER_LEVEL + 1


def award_points(state: GamificationState, points: int, reason: str) -> tuple[GamificationState, str, bool]:
    """Add points and recompute the level.

    Returns:
        Tuple of (new_state, message, leveled_up)
    """
    total = state.total_points + points
    level = calculate_level(total)
    leveled_up = level > state.level

    message = f"+{points} points! {reason}"
    if leveled_up:
        message = f"LEVEL UP! You're now level {level}! {message}"

    return state.model_copy(update={"total_points": total, "level": level}), message, leveled_up


def deduct_completion(state: GamificationState) -> GamificationState:
    """Take back the points and count of one completion, floored at zero."""
    total = max(0, state.total_points - Constants.TASK_COMPLETION_POINTS)
    return state.model_copy(
        update={
            "total_points": total,
            "level": calculate_level(total),
            "tasks_completed": max(0, state.tasks_completed - 1),
        }
    )


def record_activity(state: GamificationState, *, now: datetime) -> GamificationState:
    """Extend the activity streak for a completion on ``now``'s logical day."""
    last = state.last_activity_date
    today = logical_day(now)

    if last is not None and logical_day(last) == today:
        return state

    if last is not None and logical_day(last) == yesterday(now):
        streak = state.daily_streak + 1
    else:
        streak = 1

    return state.model_copy(update={"daily_streak": streak, "last_activity_date": now})


def give_login_bonus(state: GamificationState, *, now: datetime) -> tuple[GamificationState, str | None]:
    """Award the login bonus once per logical day.

    Returns:
        Tuple of (new_state, message); message is None if the bonus was already given
    """
    last = state.last_login_date
    if last is not None and logical_day(last) == logical_day(now):
        return state, None

    state = state.model_copy(update={"last_login_date": now})
    state, message, _ = award_points(state, Constants.LOGIN_BONUS_POINTS, "Daily login bonus!")
    logger.info(f"Login bonus awarded, total points {state.total_points}")
    return state, message


def _should_unlock(achievement_id: str, state: GamificationState, max_task_streak: int) -> bool:
    thresholds = {
        "first_task": state.tasks_completed >= 1,
        "login_7": state.daily_streak >= 7,
        "streak_3": max_task_streak >= 3,
        "streak_7": max_task_streak >= 7,
        "streak_14": max_task_streak >= 14,
        "streak_30": max_task_streak >= 30,
        "tasks_10": state.tasks_completed >= 10,
        "tasks_50": state.tasks_completed >= 50,
        "tasks_100": state.tasks_completed >= 100,
        "level_5": state.level >= 5,
        "level_10": state.level >= 10,
    }
    return thresholds.get(achievement_id, False)


def unlock_achievements(
    state: GamificationState, dailies: list[DailyTask], *, now: datetime
) -> tuple[GamificationState, list[Achievement]]:
    """Unlock every achievement whose threshold has been reached.

    Each newly unlocked achievement is stamped with ``now`` and awards the
    achievement bonus. Already unlocked achievements are never touched again.

    Args:
        state: Current gamification state
        dailies: Daily tasks, used for the best current task streak
        now: Unlock time

    Returns:
        Tuple of (new_state, newly_unlocked)
    """
    max_task_streak = max((daily.current_streak for daily in dailies), default=0)

    achievements: list[Achievement] = []
    unlocked: list[Achievement] = []
    for achievement in state.achievements:
        if not achievement.unlocked and _should_unlock(achievement.id, state, max_task_streak):
            achievement = achievement.model_copy(update={"unlocked": True, "unlocked_at": now})
            unlocked.append(achievement)
        achievements.append(achievement)

    if not unlocked:
        return state, []

    total = state.total_points + Constants.ACHIEVEMENT_BONUS_POINTS * len(unlocked)
    state = state.model_copy(
        update={"achievements": achievements, "total_points": total, "level": calculate_level(total)}
    )
    logger.info(f"Unlocked achievements: {[a.id for a in unlocked]}")
    return state, unlocked


def on_completion(
    state: GamificationState, dailies: list[DailyTask], task: DailyTask, *, now: datetime
) -> CompletionReward:
    """Run all gamification bookkeeping for one task completion.

    ``dailies`` must already contain the completed task with its new streak.
    """
    with span("gamification_service.on_completion"):
        state = state.model_copy(update={"tasks_completed": state.tasks_completed + 1})
        state = record_activity(state, now=now)
        state, message, leveled_up = award_points(
            state, Constants.TASK_COMPLETION_POINTS, f"Completed task: {task.task}"
        )
        state, unlocked = unlock_achievements(state, dailies, now=now)

        return CompletionReward(
            gamification=state,
            points_message=message,
            leveled_up=leveled_up,
            unlocked=unlocked,
        )
