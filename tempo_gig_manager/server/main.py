"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tempo_gig_manager.core.database import init_db
from tempo_gig_manager.core.logging_config import get_logger, setup_logging
from tempo_gig_manager.core.monitoring import initialize_logfire

from .api.v1 import (
    admin,
    analytics,
    artists,
    band_members,
    bands,
    calendar,
    gig_applicants,
    gigs,
    health,
    places,
    users,
    venues,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Configures logging and monitoring, and prepares the database on startup.
    """
    setup_logging()
    logger.info(f"Starting up {constant.PROJECT_NAME} {constant.VERSION}...")
    initialize_logfire(app)
    if not settings.admin_token_secret:
        logger.warning("ADMIN_TOKEN_SECRET is not set; admin login and bearer tokens are disabled")
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME}...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Tempo Gig Manager API

    Backend for a marketplace connecting music venues with artists and bands.
    It manages accounts and profiles, gig listings and applications, ranked
    booking sequences, availability calendars, analytics and the admin dashboard.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
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

app.include_router(health.router, tags=["health"])
app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users")
app.include_router(venues.router, prefix=f"{constant.API_V1_STR}/venues")
app.include_router(artists.router, prefix=f"{constant.API_V1_STR}/artists")
app.include_router(bands.router, prefix=f"{constant.API_V1_STR}/bands")
app.include_router(band_members.router, prefix=f"{constant.API_V1_STR}/band_members")
app.include_router(gigs.router, prefix=f"{constant.API_V1_STR}/gigs")
app.include_router(gig_applicants.router, prefix=f"{constant.API_V1_STR}/gig_applicants")
app.include_router(calendar.router, prefix=f"{constant.API_V1_STR}/calendar")
app.include_router(analytics.router, prefix=f"{constant.API_V1_STR}/analytics")
app.include_router(admin.router, prefix=f"{constant.API_V1_STR}/admin")
app.include_router(places.router, prefix=f"{constant.API_V1_STR}/places")


def run() -> None:
    """Run the API server with uvicorn (``tempo-server`` console script)."""
    uvicorn.run(
        "tempo_gig_manager.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
