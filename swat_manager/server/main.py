"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swat_manager import __version__
from swat_manager.core.database.session import async_session_maker, init_db
from swat_manager.core.logging_config import get_logger, setup_logging
from swat_manager.core.monitoring import initialize_logfire
from swat_manager.core.seed.loader import seed_database

from .api.v1 import (
    agencies,
    app_config,
    assessment_responses,
    assessments,
    auth,
    certifications,
    corrective_actions,
    equipment,
    events,
    health,
    messages,
    missions,
    personnel,
    questionnaire,
    reports,
    resources,
    trainings,
    users,
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

    Creates missing tables on startup and, when ``SWAT_AUTO_SEED`` is set,
    loads the official questionnaire and the default administrator.
    """
    # Startup
    try:
        logger.info("Starting up SWAT Manager Server...")
        await init_db()
        logger.info("Database initialized successfully")
        if settings.auto_seed:
            async with async_session_maker() as session:
                report = await seed_database(session)
            logger.info(f"Seed data loaded: {report}")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down SWAT Manager Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    SWAT Manager API

    Backend for the SWAT team management platform: agencies and their users,
    the official Tier Assessment and Gap Analysis questionnaires, report
    generation, and day-to-day team tracking (personnel, equipment, calendar,
    trainings, missions and messaging).
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

setup_exception_handlers(app)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

initialize_logfire(app)


app.include_router(health.router, prefix=constant.API_V1_STR, tags=["health"])
app.include_router(auth.router, prefix=constant.API_V1_STR)
app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users")
app.include_router(agencies.router, prefix=f"{constant.API_V1_STR}/agencies")
app.include_router(assessment_responses.router, prefix=f"{constant.API_V1_STR}/assessment-responses")
app.include_router(messages.router, prefix=f"{constant.API_V1_STR}/messages")
app.include_router(events.router, prefix=f"{constant.API_V1_STR}/events")

# Routers below declare full paths, most of them nested under /agencies/{agency_id}
for module in (
    assessments,
    questionnaire,
    reports,
    personnel,
    equipment,
    trainings,
    certifications,
    missions,
    corrective_actions,
    resources,
    app_config,
):
    app.include_router(module.router, prefix=constant.API_V1_STR)
