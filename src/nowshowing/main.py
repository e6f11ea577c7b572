"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nowshowing.api.routes import health, snapshot
from nowshowing.config import settings
from nowshowing.tasks.snapshot_job import run_snapshot_job

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: configure and start the scheduler
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        run_snapshot_job,
        trigger=IntervalTrigger(minutes=settings.refresh_minutes),
        id="snapshot_refresh",
        name="Refresh schedule snapshot",
        replace_existing=True,
        max_instances=1,
    )
    scheduler.start()
    logger.info(f"Scheduler started: snapshot refresh every {settings.refresh_minutes} minutes")

    # Publish a first snapshot in the background
    asyncio.create_task(run_snapshot_job())
    logger.info("Startup snapshot triggered in background")

    yield

    # Shutdown: stop the scheduler gracefully
    scheduler.shutdown(wait=False)
    logger.info("Scheduler shut down")


# Create FastAPI app
app = FastAPI(
    title="NowShowing API",
    description=f"Today's showtimes for {settings.cinema_name}",
    version="0.1.0",
    lifespan=lifespan,
)

# Widgets fetch the snapshot cross-origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(snapshot.router, prefix="/api", tags=["snapshot"])


def serve() -> None:
    """Run the API with uvicorn using the configured host and port."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
