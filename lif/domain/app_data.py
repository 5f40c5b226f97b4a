"""Aggregate of everything the dashboard persists."""

from enum import StrEnum

from pydantic import BaseModel, Field

from lif.domain.daily import DailyTask
from lif.domain.gamification import GamificationState
from lif.domain.reminder import Reminder
from lif.domain.todo import RollingTodo


class AppData(BaseModel):
    """Root record written to and read from the data file."""

    dailies: list[DailyTask] = Field(default_factory=list)
    rolling_todos: list[RollingTodo] = Field(default_factory=list)
    reminders: list[Reminder] = Field(default_factory=list)
    gamification: GamificationState = Field(default_factory=GamificationState)


class RecordKind(StrEnum):
    """Collections a record can be deleted from."""

    DAILIES = "dailies"
    TODOS = "todos"
    REMINDERS = "reminders"
