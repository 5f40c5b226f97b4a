"""Daily task domain models and enums."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from lif.domain.priority import Priority


class DailyStatus(StrEnum):
    """Daily task completion state for the current logical day."""

    DONE = "DONE"
    INCOMPLETE = "INCOMPLETE"


class DailyTask(BaseModel):
    """Recurring daily task with streak tracking."""

    id: int = Field(..., description="Stable task ID")
    task: str = Field(..., description="Task text")
    priority: Priority = Field(default=Priority.MEDIUM, description="Task priority")
    category: str = Field(default="", description="Free-text category")
    deadline: str = Field(default="", description="Free-text deadline label")
    status: DailyStatus = Field(default=DailyStatus.INCOMPLETE, description="Completion state")
    last_completed: datetime | None = Field(default=None, description="When the task was marked done today")
    current_streak: int = Field(default=0, ge=0, description="Consecutive logical days completed")
    best_streak: int = Field(default=0, ge=0, description="Longest streak ever reached")
    streak_anchor: datetime | None = Field(
        default=None,
        description="Most recent completion counted into the streak; survives the daily reset",
    )
