"""
Resource API - FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers; the
       lifespan handler builds the process-wide context objects.
Who:   Served by uvicorn (`uvicorn resource_api.main:app`, or `resource-api`).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware:  Request ID → Logging → CORS → Errors       │
    │                                                          │
    │  Routes:      /  /health  /resources  /users  /comments  │
    │               /resources/{id}/likes  /to-do-list         │
    │                                                          │
    │  Exception Handlers:                                     │
    │    ValidationError→400 │ NotFound→404 │ Database→500     │
    │                                                          │
    │  app.state:   database (Database)  notifier (Notifier)   │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup (strictly ordered, before the listener accepts traffic):
    1. Configure logging
    2. Build the Database and run SELECT 1; failure aborts startup
    3. Build the ResourceNotifier (disabled when the webhook is not configured)
    4. Log readiness

    Shutdown:
    1. Close the notifier's HTTP client
    2. Dispose the database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resource_api import __version__
from resource_api.config import settings
from resource_api.database import Database
from resource_api.exceptions import (
    DatabaseError,
    NotFoundError,
    ResourceAPIError,
    ValidationError,
)
from resource_api.middleware.errors import UnhandledErrorMiddleware
from resource_api.middleware.logging import RequestLoggingMiddleware
from resource_api.middleware.request_id import RequestIDMiddleware, request_id_var
from resource_api.routes import comments, health, likes, resources, todo, users
from resource_api.services.notification_service import ResourceNotifier

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, at startup.

    Format: 2024-01-15T12:00:00 [INFO] resource_api.main: message
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-statement / per-request chatter from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Resource API %s starting up...", __version__)

    database = Database.from_settings(settings)
    logger.info("Attempting to connect to db")
    try:
        await database.verify_connection()
    except Exception:
        logger.critical("Could not connect to the database; not starting.", exc_info=True)
        await database.dispose()
        raise
    logger.info("Connected to db!")

    notifier = ResourceNotifier.from_settings(settings)
    if not notifier.enabled:
        logger.warning("DISCORD_ID / DISCORD_TOKEN not set: resource notifications are disabled")

    app.state.database = database
    app.state.notifier = notifier

    logger.info(
        "Server started listening for HTTP requests on %s:%d. Let's go!",
        settings.host,
        settings.port,
    )

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Resource API shutting down...")
    await notifier.aclose()
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Every failure path ends in a response:
        ValidationError    → 400 Bad Request (client can fix the input)
        NotFoundError      → 404 Not Found
        DatabaseError      → 500 Internal Server Error (generic message)
        ResourceAPIError   → 500 Internal Server Error
        anything else      → 500 Internal Server Error, answered by
                             UnhandledErrorMiddleware (stack trace logged)

    Server-side details (SQL, constraint names, driver messages) are only
    logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
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

    @app.exception_handler(ResourceAPIError)
    async def handle_app_error(request: Request, exc: ResourceAPIError):
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


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Assemble the application.

    app.state.database and app.state.notifier are filled in by the lifespan
    handler; tests install their own instances instead.
    """
    app = FastAPI(
        title="Resource API",
        description=(
            "Stores shared learning resources with comments, likes and per-user "
            "to-do lists, and announces new resources on Discord."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → UnhandledError → route
    # UnhandledError is innermost so its 500s still get CORS and X-Request-ID
    app.add_middleware(UnhandledErrorMiddleware)

    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed responses with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(resources.router)
    app.include_router(users.router)
    app.include_router(comments.router)
    app.include_router(likes.router)
    app.include_router(todo.router)

    return app


app = create_app()


def run() -> None:
    """Start uvicorn on settings.host:settings.port."""
    import uvicorn

    uvicorn.run(
        "resource_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
