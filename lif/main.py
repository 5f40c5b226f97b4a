"""lif - personal productivity dashboard with streaks and reminders."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from lif.core.config import settings
from lif.core.logging import configure_logfire, instrument_fastapi
from lif.core.scheduler import scheduler_is_running, start_scheduler, stop_scheduler
from lif.core.store import JsonFileStore
from lif.interface.dashboard_router import router as dashboard_router
from lif.interface.notifier import build_notifier
from lif.services.runtime import DashboardRuntime


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    # Startup
    # Configure logging first so startup logs are captured
    configure_logfire()

    runtime = DashboardRuntime(JsonFileStore(settings.data_file), build_notifier(settings))
    outcome = await runtime.startup(datetime.now())
    logger.info(f"Dashboard ready: {outcome.message}")
    app.state.runtime = runtime

    start_scheduler(runtime)
    yield
    # Shutdown
    stop_scheduler()


app = FastAPI(
    title="lif",
    description="Personal productivity dashboard with daily streaks and reminders",
    version="0.1.0",
    lifespan=lifespan,
)

# Instrument FastAPI with Logfire
instrument_fastapi(app)

# Register routers
app.include_router(dashboard_router)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    status = "healthy" if scheduler_is_running() else "degraded"
    return JSONResponse(content={"status": status}, status_code=200)
