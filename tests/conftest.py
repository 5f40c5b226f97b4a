"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

import pytest

from lif.domain.daily import DailyStatus, DailyTask
from lif.domain.reminder import Reminder, ReminderStatus


# 2024-01-01 is a Monday; 08:00 is well inside the logical day
NOW = datetime(2024, 1, 1, 8, 0, 0)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for engine tests."""
    return NOW


@pytest.fixture
def make_daily() -> Callable[..., DailyTask]:
    """Factory for daily tasks with sensible defaults."""

    def _make(**overrides: Any) -> DailyTask:
        fields: dict[str, Any] = {"id": 1, "task": "stretch", "status": DailyStatus.INCOMPLETE}
        fields.update(overrides)
        return DailyTask(**fields)

    return _make


@pytest.fixture
def make_reminder() -> Callable[..., Reminder]:
    """Factory for reminders; defaults to an active 30m countdown armed at NOW."""

    def _make(**overrides: Any) -> Reminder:
        fields: dict[str, Any] = {
            "id": 1,
            "reminder": "tea",
            "alarm_or_countdown": "30m",
            "status": ReminderStatus.ACTIVE,
            "created_at": NOW,
            "target_time": NOW + timedelta(minutes=30),
            "is_countdown": True,
        }
        fields.update(overrides)
        return Reminder(**fields)

    return _make
