"""Unit tests for DashboardRuntime."""

import asyncio
from datetime import timedelta

import pytest

from lif.core.errors import OutcomeCode
from lif.domain.app_data import AppData, RecordKind
from lif.domain.create_models import DailyCreate, ReminderCreate
from lif.domain.daily import DailyStatus
from lif.domain.reminder import ReminderStatus
from lif.services.runtime import DashboardRuntime
from tests.unit.mocks import InMemoryStore, RecordingNotifier


async def _drain_notifications() -> None:
    # Let fire-and-forget notification tasks run
    for _ in range(3):
        await asyncio.sleep(0)


@pytest.mark.unit
class TestStartup:
    """Tests for DashboardRuntime.startup."""

    @pytest.mark.asyncio
    async def test_loads_and_persists_login_bonus(self, runtime, in_memory_store, now):
        outcome = await runtime.startup(now)

        assert outcome.message == "+5 points! Daily login bonus!"
        assert runtime.data.gamification.total_points == 5
        assert in_memory_store.save_count == 1
        assert in_memory_store.data.gamification.total_points == 5

    @pytest.mark.asyncio
    async def test_rearms_stored_reminders(self, make_reminder, now):
        stored = AppData(
            reminders=[make_reminder(status=ReminderStatus.INACTIVE, target_time=None, alarm_or_countdown="10m")]
        )
        runtime = DashboardRuntime(InMemoryStore(stored), RecordingNotifier())

        await runtime.startup(now)

        assert runtime.data.reminders[0].status == ReminderStatus.ACTIVE
        assert runtime.data.reminders[0].target_time == now + timedelta(minutes=10)


@pytest.mark.unit
class TestTick:
    """Tests for DashboardRuntime.tick."""

    @pytest.mark.asyncio
    async def test_quiet_tick_does_not_save(self, runtime, in_memory_store, now):
        await runtime.startup(now)
        saves = in_memory_store.save_count

        result = await runtime.tick(now + timedelta(seconds=1))

        assert result.changed is False
        assert in_memory_store.save_count == saves

    @pytest.mark.asyncio
    async def test_fired_reminder_notified_exactly_once(self, runtime, recording_notifier, in_memory_store, now):
        await runtime.startup(now)
        await runtime.add_reminder(ReminderCreate(reminder="tea", alarm_or_countdown="5s"), now)

        for second in range(4, 10):
            await runtime.tick(now + timedelta(seconds=second))
        await _drain_notifications()

        assert [e.label for e in recording_notifier.events] == ["tea"]
        assert runtime.data.reminders[0].status == ReminderStatus.EXPIRED
        assert in_memory_store.data.reminders[0].notified is True

    @pytest.mark.asyncio
    async def test_daily_reset_persisted(self, runtime, in_memory_store, now):
        await runtime.startup(now)
        await runtime.add_daily(DailyCreate(task="stretch"))
        await runtime.toggle_daily(1, now)

        result = await runtime.tick(now + timedelta(days=1))

        assert result.reset_occurred is True
        assert in_memory_store.data.dailies[0].status == DailyStatus.INCOMPLETE

    @pytest.mark.asyncio
    async def test_save_failure_keeps_in_memory_state(self, runtime, in_memory_store, now):
        await runtime.startup(now)
        in_memory_store.fail_saves = True

        result = await runtime.add_daily(DailyCreate(task="stretch"))

        assert result.outcome.ok
        assert [d.task for d in runtime.data.dailies] == ["stretch"]
        assert in_memory_store.data.dailies == []


@pytest.mark.unit
class TestActions:
    """Tests for user actions routed through the runtime."""

    @pytest.mark.asyncio
    async def test_noop_action_does_not_save(self, runtime, in_memory_store, now):
        await runtime.startup(now)
        await runtime.add_reminder(ReminderCreate(reminder="tea", alarm_or_countdown="5m"), now)
        saves = in_memory_store.save_count

        result = await runtime.reminder_action(1, "start", now)

        assert result.outcome.code == OutcomeCode.ALREADY_ACTIVE
        assert in_memory_store.save_count == saves

    @pytest.mark.asyncio
    async def test_delete_persists(self, runtime, in_memory_store, now):
        await runtime.startup(now)
        await runtime.add_daily(DailyCreate(task="stretch"))

        await runtime.delete_record(RecordKind.DAILIES, 1)

        assert in_memory_store.data.dailies == []
