"""
Feedback Tracker Backend — FastAPI Application Factory
=======================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn feedback.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐        │
    │  │ Req ID   │→│ Logging │→│ GZip │→│ CORS │        │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  /api/blood-pressures  /api/points  /api/weights    │
    │  /health                                            │
    │                                                     │
    │  Exception Handlers:                                │
    │  BadRequestAlert→400 │ NotFound→404 │ Auth→401      │
    │  Database→500 │ Exception→500                       │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, Response

from feedback import __version__
from feedback.config import settings
from feedback.database import dispose_engine
from feedback.exceptions import (
    AuthenticationError,
    BadRequestAlertError,
    DatabaseError,
    FeedbackError,
    NotFoundError,
)
from feedback.middleware.logging import RequestLoggingMiddleware
from feedback.middleware.request_id import RequestIDMiddleware, request_id_var
from feedback.routes import blood_pressures, health, points, weights
from feedback.routes.alerts import failure_alert

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    When:    Called once during app startup, before any other initialization.
    Format:  %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # These log every operation at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, configuration check. Shutdown: close pooled connections.
    """
    setup_logging()
    logger.info("Feedback Tracker Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: /health stays useful while the operator fixes the config
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Feedback Tracker Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Handler hierarchy:
        BadRequestAlertError → 400, empty body, X-<app>-error/params headers
        NotFoundError        → 404, empty body
        AuthenticationError  → 401, JSON error
        DatabaseError        → 500, generic JSON error
        FeedbackError (base) → 500, generic JSON error
        Exception (fallback) → 500, generic JSON error

    Security: handlers never expose SQL, stack traces or context dicts in
    the response; those are logged server-side.
    """

    @app.exception_handler(BadRequestAlertError)
    async def handle_bad_request_alert(request: Request, exc: BadRequestAlertError):
        rid = request_id_var.get("")
        logger.warning("[%s] Bad request: %s", rid, exc.message)
        return Response(
            status_code=400,
            headers=failure_alert(exc.entity_name, exc.error_key),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.debug("[%s] %s", request_id_var.get(""), exc.message)
        return Response(status_code=404)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        rid = request_id_var.get("")
        logger.info("[%s] Authentication failed: %s", rid, exc.message)
        return JSONResponse(
            status_code=401,
            content={
                "error": "unauthorized",
                "message": exc.message,
                "request_id": rid,
            },
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(FeedbackError)
    async def handle_feedback_error(request: Request, exc: FeedbackError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Feedback Tracker API",
        description=(
            "Personal health tracking: blood pressure readings, daily points "
            "and weigh-ins, each exposed as a paginated REST collection."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "X-Request-ID",
            "X-Total-Count",
            "Link",
            "Location",
            f"X-{settings.app_name}-alert",
            f"X-{settings.app_name}-error",
            f"X-{settings.app_name}-params",
        ],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(blood_pressures.router)
    app.include_router(points.router)
    app.include_router(weights.router)
    app.include_router(health.router)

    return app


app = create_app()
