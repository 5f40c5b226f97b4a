"""In-memory dashboard state with persistence and notification side effects.

The runtime is driven from the event loop: scheduler ticks and HTTP requests
each run the pure dashboard functions to completion before anything is
awaited, so state updates never interleave. Only saves and notifications are
deferred.
"""

import asyncio
import logging
from datetime import datetime

from lif.core.errors import Outcome, StoreError
from lif.core.logging import span
from lif.core.store import DataStore
from lif.domain.app_data import AppData, RecordKind
from lif.domain.create_models import DailyCreate, ReminderCreate, TodoCreate
from lif.interface.notifier import Notifier, dispatch
from lif.models.service_models import DashboardResult, DashboardSummary, TickResult
from lif.services import dashboard_service


logger = logging.getLogger(__name__)


class DashboardRuntime:
    """Owns the current ``AppData`` and its store and notifier."""

    def __init__(self, store: DataStore, notifier: Notifier) -> None:
        self._store = store
        self._notifier = notifier
        self._data = AppData()
        self._save_lock = asyncio.Lock()

    @property
    def data(self) -> AppData:
        return self._data

    async def _persist(self) -> None:
        """Save the latest state off the event loop; failures keep in-memory state."""
        async with self._save_lock:
            try:
                await asyncio.to_thread(self._store.save, self._data)
            except StoreError as e:
                logger.error(f"Failed to save dashboard data: {e}")

    async def _apply(self, result: DashboardResult) -> DashboardResult:
        if result.changed:
            self._data = result.data
            await self._persist()
        return result

    async def startup(self, now: datetime) -> Outcome:
        """Load stored data and bring it up to date for ``now``.

        Raises:
            StoreError: If the data file exists but cannot be read
        """
        with span("runtime.startup"):
            loaded = await asyncio.to_thread(self._store.load)
            self._data = loaded
            result = await self._apply(dashboard_service.open_session(loaded, now=now))
            logger.info(
                f"Dashboard loaded: {len(self._data.dailies)} dailies, "
                f"{len(self._data.rolling_todos)} todos, {len(self._data.reminders)} reminders"
            )
            return result.outcome

    async def tick(self, now: datetime) -> TickResult:
        """Run one tick; persist on change and notify fired reminders."""
        result = dashboard_service.run_tick(self._data, now=now)
        if not result.changed:
            return result

        self._data = result.data
        if result.fired:
            dispatch(self._notifier, result.fired)
        await self._persist()
        return result

    def summary(self, now: datetime) -> DashboardSummary:
        return dashboard_service.summarize(self._data, now=now)

    async def toggle_daily(self, task_id: int, now: datetime) -> DashboardResult:
        return await self._apply(dashboard_service.toggle_daily(self._data, task_id, now=now))

    async def add_daily(self, payload: DailyCreate) -> DashboardResult:
        return await self._apply(dashboard_service.add_daily(self._data, payload))

    async def edit_daily(self, task_id: int, payload: DailyCreate) -> DashboardResult:
        return await self._apply(dashboard_service.edit_daily(self._data, task_id, payload))

    async def add_todo(self, payload: TodoCreate) -> DashboardResult:
        return await self._apply(dashboard_service.add_todo(self._data, payload))

    async def edit_todo(self, todo_id: int, payload: TodoCreate) -> DashboardResult:
        return await self._apply(dashboard_service.edit_todo(self._data, todo_id, payload))

    async def add_reminder(self, payload: ReminderCreate, now: datetime) -> DashboardResult:
        return await self._apply(dashboard_service.add_reminder(self._data, payload, now=now))

    async def edit_reminder(self, reminder_id: int, payload: ReminderCreate, now: datetime) -> DashboardResult:
        return await self._apply(dashboard_service.edit_reminder(self._data, reminder_id, payload, now=now))

    async def reminder_action(self, reminder_id: int, action: str, now: datetime) -> DashboardResult:
        return await self._apply(dashboard_service.reminder_action(self._data, reminder_id, action, now=now))

    async def delete_record(self, kind: RecordKind, record_id: int) -> DashboardResult:
        return await self._apply(dashboard_service.delete_record(self._data, kind, record_id))
