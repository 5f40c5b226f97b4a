"""Pydantic models for service layer return types.

Engine operations return these instead of raising, so callers always get the
updated records back together with whatever happened to them.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from lif.core.errors import Outcome
from lif.domain.app_data import AppData
from lif.domain.daily import DailyTask
from lif.domain.gamification import Achievement, GamificationState
from lif.domain.reminder import Reminder


class SweepResult(BaseModel):
    """Result of one daily reset sweep."""

    tasks: list[DailyTask]
    changed: bool
    reset_ids: list[int] = Field(default_factory=list, description="Tasks flipped back to INCOMPLETE")
    lapsed_ids: list[int] = Field(default_factory=list, description="Tasks whose streak was broken")


class ReminderFired(BaseModel):
    """Notification event for a reminder that reached its target time."""

    reminder_id: int
    label: str
    note: str = ""
    target_time: datetime
    fired_at: datetime


class ExpiryResult(BaseModel):
    """Result of one expiry check over all reminders."""

    reminders: list[Reminder]
    fired: list[ReminderFired] = Field(default_factory=list)


class ReminderTransition(BaseModel):
    """Reminder after a user-driven transition, plus what happened."""

    reminder: Reminder
    outcome: Outcome


class CompletionReward(BaseModel):
    """Gamification bookkeeping produced by a task completion."""

    gamification: GamificationState
    points_message: str
    leveled_up: bool = False
    unlocked: list[Achievement] = Field(default_factory=list)


class TickResult(BaseModel):
    """Result of one scheduler tick over the whole dashboard."""

    data: AppData
    changed: bool
    reset_occurred: bool = False
    fired: list[ReminderFired] = Field(default_factory=list)


class DashboardResult(BaseModel):
    """Dashboard data after a user action, plus the message to show."""

    data: AppData
    outcome: Outcome
    record_id: int | None = None
    changed: bool = True


class NotificationResult(BaseModel):
    """Result of delivering a reminder notification."""

    reminder_id: int
    success: bool
    error: str | None = None


class UpcomingReminder(BaseModel):
    """Active or paused reminder as shown on the dashboard home view."""

    id: int
    label: str
    status: str
    countdown: str
    remaining_seconds: float


class DashboardSummary(BaseModel):
    """Home view: progress counters and what is coming up."""

    level: int
    total_points: int
    daily_streak: int
    achievements_unlocked: int
    achievements_total: int
    dailies_done: int
    dailies_total: int
    rolling_todos: int
    upcoming: list[UpcomingReminder] = Field(default_factory=list)
    expired: list[str] = Field(default_factory=list)
