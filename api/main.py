"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (logs the active scheduling defaults)
3. Registers all routers (simulations, scheduler, health)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.
It replaces the older @app.on_event("startup") pattern.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from api.routers import simulations, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs on startup (before yield) and shutdown (after yield).

    There are no connections to open: every simulation builds its own
    policy and engine per request. Startup only reports the defaults.
    """
    logger.info(
        f"API ready — default policy: {settings.DEFAULT_SCHEDULING_POLICY} "
        f"(quantum={settings.ROUND_ROBIN_TIME_QUANTUM})"
    )

    yield  # app is running and serving requests between startup and shutdown

    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="CPU Scheduling Simulator",
        description="Cycle-by-cycle CPU scheduling simulator with a pluggable Round Robin policy",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Register routers — each one adds its endpoints to the app
    app.include_router(health.router)
    app.include_router(simulations.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
