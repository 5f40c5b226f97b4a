"""Gamification domain models: points, levels and achievements."""

from datetime import datetime

from pydantic import BaseModel, Field


class Achievement(BaseModel):
    """Unlockable achievement."""

    id: str = Field(..., description="Stable achievement key, e.g. 'streak_7'")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="How to unlock it")
    icon: str = Field(default="", description="Emoji shown next to the name")
    unlocked: bool = Field(default=False, description="Whether it has been earned")
    unlocked_at: datetime | None = Field(default=None, description="When it was earned")


def default_achievements() -> list[Achievement]:
    """Return the full achievement catalogue, all locked."""
    return [
        Achievement(id="first_task", name="First Steps", description="Complete your first task", icon="🎯"),
        Achievement(id="login_7", name="Consistent Checker", description="Check in 7 days in a row", icon="📅"),
        Achievement(id="streak_3", name="On Fire!", description="Get a 3-day task streak", icon="🔥"),
        Achievement(id="streak_7", name="Week Warrior", description="Get a 7-day task streak", icon="⚡"),
        Achievement(id="streak_14", name="Fortnight Force", description="Get a 14-day task streak", icon="💫"),
        Achievement(id="streak_30", name="Monthly Master", description="Get a 30-day task streak", icon="💪"),
        Achievement(id="tasks_10", name="Taskmaster", description="Complete 10 tasks", icon="📋"),
        Achievement(id="tasks_50", name="Productivity Pro", description="Complete 50 tasks", icon="🚀"),
        Achievement(id="tasks_100", name="Century Club", description="Complete 100 tasks", icon="💯"),
        Achievement(id="level_5", name="Level 5 Hero", description="Reach level 5", icon="⭐"),
        Achievement(id="level_10", name="Elite Achiever", description="Reach level 10", icon="🏆"),
    ]


class GamificationState(BaseModel):
    """Dashboard-wide progress counters."""

    total_points: int = Field(default=0, ge=0, description="Points earned")
    level: int = Field(default=1, ge=1, description="Level derived from points")
    daily_streak: int = Field(default=0, ge=0, description="Consecutive logical days with any completion")
    last_activity_date: datetime | None = Field(default=None, description="Last completion of any task")
    last_login_date: datetime | None = Field(default=None, description="Last login bonus award")
    achievements: list[Achievement] = Field(default_factory=default_achievements, description="Achievement catalogue")
    tasks_completed: int = Field(default=0, ge=0, description="Net number of completions")
