"""certtrack API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Error handlers map CertTrackError / validation / router misses to JSON
    - Unclassified failures are turned into 500s by RequestBoundaryMiddleware
    - Database manager created on startup via the lifespan and kept on app.state

Design Decisions:
    - create_app() factory so tests and the serverless entrypoint build the
      same app; the module-level `app` is what ASGI servers import
    - redirect_slashes off: paths match exactly, "/workers/" is a route miss
    - StripApiPrefixMiddleware added last so it is outermost: every other
      layer already sees the stripped path
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from certtrack.api.error_handlers import register_error_handlers
from certtrack.api.middleware import RequestBoundaryMiddleware, StripApiPrefixMiddleware
from certtrack.api.routes import certifications, courses, health, stats, workers
from certtrack.config import Settings, get_settings
from certtrack.infrastructure.database import build_db_manager
from certtrack.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if getattr(app.state, "db", None) is None:
        app.state.db = build_db_manager(settings)
    logger.info("certtrack API started")
    yield
    logger.info("certtrack API shutting down")
    await app.state.db.dispose()
    app.state.db = None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="certtrack API", version="1.0.0", lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.expose_errors = settings.is_development
    app.state.db = None

    app.add_middleware(
        RequestBoundaryMiddleware, expose_errors=settings.is_development,
    )
    app.add_middleware(StripApiPrefixMiddleware)

    app.include_router(health.router)
    app.include_router(stats.router)
    app.include_router(workers.router)
    app.include_router(courses.router)
    app.include_router(certifications.router)

    register_error_handlers(app)
    return app


app = create_app()
