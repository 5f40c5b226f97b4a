"""Scheduler for the dashboard tick (daily reset sweep and reminder expiry)."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from lif.core.config import constants, settings


if TYPE_CHECKING:
    from lif.services.runtime import DashboardRuntime


logger = logging.getLogger(__name__)

# Global scheduler instance, created on start so it binds to the running loop
scheduler: AsyncIOScheduler | None = None


async def run_tick(runtime: "DashboardRuntime") -> None:
    """Deliver the current wall-clock time to the runtime.

    Errors are logged and swallowed so one bad tick never stops the job.
    """
    try:
        await runtime.tick(datetime.now())
    except Exception as e:
        logger.error(f"Error in dashboard tick: {e}")


def start_scheduler(runtime: "DashboardRuntime", *, interval_seconds: float | None = None) -> AsyncIOScheduler:
    """Start the scheduler and register the tick job.

    This should be called during FastAPI app startup.
    """
    global scheduler

    interval = interval_seconds or settings.tick_interval_seconds
    logger.info("Starting scheduler")

    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        run_tick,
        trigger=IntervalTrigger(seconds=interval),
        args=[runtime],
        id=constants.TICK_JOB_ID,
        name="Dashboard Tick",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    logger.info(f"Scheduled dashboard tick job: every {interval}s")

    scheduler.start()
    logger.info("Scheduler started successfully")
    return scheduler


def stop_scheduler() -> None:
    """Stop the scheduler.

    This should be called during FastAPI app shutdown.
    """
    global scheduler

    if scheduler is None:
        return

    logger.info("Stopping scheduler")
    scheduler.shutdown(wait=True)
    scheduler = None
    logger.info("Scheduler stopped")


def scheduler_is_running() -> bool:
    return scheduler is not None and scheduler.running
