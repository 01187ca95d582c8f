"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request tracing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecowaste import __version__
from ecowaste.core.database.session import init_db
from ecowaste.core.logging_config import get_logger, setup_logging
from ecowaste.core.monitoring import initialize_logfire

from .api.v1 import (
    analytics,
    auth,
    challenges,
    cleanup_events,
    community_reports,
    health,
    learning,
    pickups,
    rewards,
    waste_entries,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on SQLite; PostgreSQL schemas are managed by Alembic.
    """
    logger.info("Starting up EcoWaste Server...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down EcoWaste Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    EcoWaste Server API

    Backend for the EcoWaste application: waste logging, pickups, community
    reports and cleanup events, challenges, EcoPoints rewards and recycling quizzes.
    """,
    version=__version__,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
for module in (
    auth,
    waste_entries,
    pickups,
    community_reports,
    cleanup_events,
    challenges,
    rewards,
    analytics,
    learning,
):
    app.include_router(module.router, prefix=constant.API_PREFIX)


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)
