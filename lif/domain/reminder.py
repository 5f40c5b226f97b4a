"""Reminder domain models and enums."""

from datetime import datetime, timedelta
from enum import StrEnum

from pydantic import BaseModel, Field


class ReminderStatus(StrEnum):
    """Reminder lifecycle state."""

    ACTIVE = "active"  # Armed, counting toward target_time
    PAUSED = "paused"  # Armed, clock frozen with remaining time banked
    EXPIRED = "expired"  # Target passed, notification fired
    INACTIVE = "inactive"  # Spec stored but not armed


class Reminder(BaseModel):
    """Countdown or alarm reminder."""

    id: int = Field(..., description="Stable reminder ID")
    reminder: str = Field(..., description="Reminder label")
    note: str = Field(default="", description="Free-text note")
    alarm_or_countdown: str = Field(default="", description="Raw spec, e.g. '30m', '2w' or '1:50PM'")
    status: ReminderStatus = Field(default=ReminderStatus.INACTIVE, description="Lifecycle state")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    target_time: datetime | None = Field(default=None, description="When the reminder fires")
    is_countdown: bool = Field(default=False, description="True for relative specs, False for alarms")
    notified: bool = Field(default=False, description="Notification already fired for this arming")
    paused_remaining: timedelta | None = Field(default=None, description="Banked time while paused")

    @property
    def label(self) -> str:
        return self.reminder


class ReminderAction(StrEnum):
    """User-driven reminder transitions."""

    START = "start"
    PAUSE = "pause"
    RESET = "reset"
