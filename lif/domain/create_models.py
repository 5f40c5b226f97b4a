"""Pydantic models for creating and editing records.

Editing replaces every user-editable field, so the same payloads are used for
both operations.
"""

from pydantic import BaseModel, Field, field_validator

from lif.domain.priority import Priority, normalize_priority, normalize_text


class _TaskFields(BaseModel):
    task: str = Field(..., min_length=1, description="Task text")
    priority: Priority = Field(default=Priority.MEDIUM, description="HIGH/MEDIUM/LOW or an alias such as 'h'")
    category: str = Field(default="", description="Free-text category")
    deadline: str = Field(default="", description="Free-text deadline label")

    @field_validator("task")
    @classmethod
    def normalize_task(cls, v: str) -> str:
        """Normalize task text and reject blank input."""
        v = normalize_text(v)
        if not v:
            msg = "Task text must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str) -> str:
        return normalize_text(v)

    @field_validator("priority", mode="before")
    @classmethod
    def parse_priority(cls, v: object) -> object:
        """Accept loose priority input such as 'h', 'med' or 'Low priority'."""
        if isinstance(v, str):
            return normalize_priority(v)
        return v


class DailyCreate(_TaskFields):
    """Payload for creating or editing a daily task."""


class TodoCreate(_TaskFields):
    """Payload for creating or editing a rolling todo."""


class ReminderCreate(BaseModel):
    """Payload for creating or editing a reminder."""

    reminder: str = Field(..., min_length=1, description="Reminder label")
    note: str = Field(default="", description="Free-text note")
    alarm_or_countdown: str = Field(default="", description="Countdown ('30m', '2w') or alarm ('1:50PM', '15:04')")

    @field_validator("reminder")
    @classmethod
    def normalize_label(cls, v: str) -> str:
        """Normalize the label and reject blank input."""
        v = normalize_text(v)
        if not v:
            msg = "Reminder label must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("note")
    @classmethod
    def normalize_note(cls, v: str) -> str:
        return normalize_text(v)
