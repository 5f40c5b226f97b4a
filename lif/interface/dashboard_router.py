"""Dashboard HTTP router: dailies, rolling todos, reminders and the home view."""

import logging
from datetime import datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from lif.core.errors import OutcomeCode
from lif.domain.app_data import RecordKind
from lif.domain.create_models import DailyCreate, ReminderCreate, TodoCreate
from lif.domain.daily import DailyTask
from lif.domain.reminder import Reminder
from lif.domain.todo import RollingTodo
from lif.models.service_models import DashboardResult, DashboardSummary
from lif.services import reminder_service
from lif.services.runtime import DashboardRuntime


logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])


def get_runtime(request: Request) -> DashboardRuntime:
    """Runtime created by the application lifespan."""
    return request.app.state.runtime


def get_now() -> datetime:
    """Local wall-clock time; overridden in tests."""
    return datetime.now()


RuntimeDep = Annotated[DashboardRuntime, Depends(get_runtime)]
NowDep = Annotated[datetime, Depends(get_now)]


def _respond(result: DashboardResult, records: list[Any]) -> dict[str, Any]:
    """Turn a dashboard result into a response body, mapping lookup errors to HTTP errors."""
    if result.outcome.code is OutcomeCode.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.outcome.message)
    if result.outcome.code is OutcomeCode.UNKNOWN_ACTION:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.outcome.message)

    record = next((r for r in records if r.id == result.record_id), None)
    return {
        "outcome": result.outcome.model_dump(mode="json"),
        "record": record.model_dump(mode="json") if record is not None else None,
    }


def _reminder_view(reminder: Reminder, now: datetime) -> dict[str, Any]:
    return {
        **reminder.model_dump(mode="json"),
        "time_label": reminder_service.time_label(reminder, now=now),
    }


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(runtime: RuntimeDep, now: NowDep) -> DashboardSummary:
    """Home view summary."""
    return runtime.summary(now)


@router.get("/dailies", response_model=list[DailyTask])
async def list_dailies(runtime: RuntimeDep) -> list[DailyTask]:
    return runtime.data.dailies


@router.post("/dailies", status_code=status.HTTP_201_CREATED)
async def create_daily(payload: DailyCreate, runtime: RuntimeDep) -> dict[str, Any]:
    result = await runtime.add_daily(payload)
    return _respond(result, result.data.dailies)


@router.put("/dailies/{task_id}")
async def update_daily(task_id: int, payload: DailyCreate, runtime: RuntimeDep) -> dict[str, Any]:
    result = await runtime.edit_daily(task_id, payload)
    return _respond(result, result.data.dailies)


@router.post("/dailies/{task_id}/toggle")
async def toggle_daily(task_id: int, runtime: RuntimeDep, now: NowDep) -> dict[str, Any]:
    """Mark a daily done, or back to incomplete if it already is."""
    result = await runtime.toggle_daily(task_id, now)
    return _respond(result, result.data.dailies)


@router.get("/todos", response_model=list[RollingTodo])
async def list_todos(runtime: RuntimeDep) -> list[RollingTodo]:
    return runtime.data.rolling_todos


@router.post("/todos", status_code=status.HTTP_201_CREATED)
async def create_todo(payload: TodoCreate, runtime: RuntimeDep) -> dict[str, Any]:
    result = await runtime.add_todo(payload)
    return _respond(result, result.data.rolling_todos)


@router.put("/todos/{todo_id}")
async def update_todo(todo_id: int, payload: TodoCreate, runtime: RuntimeDep) -> dict[str, Any]:
    result = await runtime.edit_todo(todo_id, payload)
    return _respond(result, result.data.rolling_todos)


@router.get("/reminders")
async def list_reminders(runtime: RuntimeDep, now: NowDep) -> list[dict[str, Any]]:
    """All reminders with their live time label."""
    return [_reminder_view(reminder, now) for reminder in runtime.data.reminders]


@router.post("/reminders", status_code=status.HTTP_201_CREATED)
async def create_reminder(payload: ReminderCreate, runtime: RuntimeDep, now: NowDep) -> dict[str, Any]:
    """Create a reminder; an unparseable spec leaves it inactive."""
    result = await runtime.add_reminder(payload, now)
    return _respond(result, result.data.reminders)


@router.put("/reminders/{reminder_id}")
async def update_reminder(
    reminder_id: int, payload: ReminderCreate, runtime: RuntimeDep, now: NowDep
) -> dict[str, Any]:
    result = await runtime.edit_reminder(reminder_id, payload, now)
    return _respond(result, result.data.reminders)


@router.post("/reminders/{reminder_id}/{action}")
async def act_on_reminder(reminder_id: int, action: str, runtime: RuntimeDep, now: NowDep) -> dict[str, Any]:
    """Start, pause or reset a reminder. Rejected transitions still return 200 with their outcome."""
    result = await runtime.reminder_action(reminder_id, action, now)
    return _respond(result, result.data.reminders)


@router.delete("/{kind}/{record_id}")
async def delete_record(kind: RecordKind, record_id: int, runtime: RuntimeDep) -> dict[str, Any]:
    result = await runtime.delete_record(kind, record_id)
    if result.outcome.code is OutcomeCode.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.outcome.message)
    logger.info(f"Deleted {kind.value} {record_id} via API")
    return {"outcome": result.outcome.model_dump(mode="json"), "record": None}
