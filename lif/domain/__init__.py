"""Domain models and DTOs."""

from lif.domain.app_data import AppData, RecordKind
from lif.domain.create_models import DailyCreate, ReminderCreate, TodoCreate
from lif.domain.daily import DailyStatus, DailyTask
from lif.domain.gamification import Achievement, GamificationState
from lif.domain.priority import Priority
from lif.domain.reminder import Reminder, ReminderAction, ReminderStatus
from lif.domain.todo import RollingTodo


__all__ = [
    "Achievement",
    "AppData",
    "DailyCreate",
    "DailyStatus",
    "DailyTask",
    "GamificationState",
    "Priority",
    "RecordKind",
    "Reminder",
    "ReminderAction",
    "ReminderCreate",
    "ReminderStatus",
    "RollingTodo",
    "TodoCreate",
]
