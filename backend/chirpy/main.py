"""
Chirpy Backend — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn chirpy.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────┐ ┌─────────────────┐                    │
    │  │  Req ID  │→│  Logging        │                    │
    │  └──────────┘ └─────────────────┘                    │
    │                                                      │
    │  Routes:                                             │
    │  ┌──────────────────────┐ ┌────────────────────────┐ │
    │  │ POST /api/validate_  │ │ GET /admin/metrics     │ │
    │  │      chirp           │ │ POST /admin/reset      │ │
    │  │ POST /api/users      │ │ GET /api/healthz       │ │
    │  └──────────────────────┘ └────────────────────────┘ │
    │  Mount: /app → [Hit Counter] → StaticFiles           │
    │                                                      │
    │  Exception Handlers:                                 │
    │  ValidationError→400  │  RequestDecodeError→500      │
    │  DatabaseError→500    │  ChirpyError→500             │
    └──────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from chirpy import __version__
from chirpy.config import settings
from chirpy.database import dispose_engine
from chirpy.exceptions import (
    ChirpyError,
    DatabaseError,
    RequestDecodeError,
    ValidationError,
)
from chirpy.middleware.logging import RequestLoggingMiddleware
from chirpy.middleware.metrics import instrument
from chirpy.middleware.request_id import RequestIDMiddleware, request_id_var
from chirpy.routes import admin, chirps, health, users
from chirpy.services.hit_counter import RequestCounter

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Quiet third-party loggers that log every operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:  logging, configuration check, static directory report.
    Shutdown: dispose the database engine.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Chirpy Backend %s starting up (platform=%s)...", __version__, settings.platform)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: moderation and metrics work without a database
        logger.error("Configuration error: %s", str(e))

    static_root = Path(app.state.static_root)
    static_root.mkdir(parents=True, exist_ok=True)
    logger.info("Serving static files from %s", static_root.resolve())

    logger.info("Banned words: %s", ", ".join(sorted(settings.banned_words_set)))
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Chirpy Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and {"error": ...} bodies.

    Handler hierarchy:
        ValidationError     → 400 (message returned as-is)
        RequestDecodeError  → 500
        DatabaseError       → 500 (generic message; details logged)
        ChirpyError (base)  → 500
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestDecodeError)
    async def handle_decode_error(request: Request, exc: RequestDecodeError):
        rid = request_id_var.get("")
        logger.error("[%s] Could not decode request to %s: %s", rid, request.url.path, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": "An internal error occurred. Please try again later."},
        )

    @app.exception_handler(ChirpyError)
    async def handle_chirpy_error(request: Request, exc: ChirpyError):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled application error: %s", rid, exc.message, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Something went wrong"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    hit_counter: Optional[RequestCounter] = None,
    static_root: Optional[str] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        hit_counter: Counter for /app/ hits. A fresh one is created when
            omitted, so every app instance counts independently.
        static_root: Directory served under /app/ (default: FILEPATH_ROOT).

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Chirpy API",
        description="Short text posts (chirps) with length validation and banned-word redaction.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.hit_counter = hit_counter if hit_counter is not None else RequestCounter()
    app.state.static_root = static_root or settings.filepath_root

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(chirps.router)
    app.include_router(users.router)
    app.include_router(health.router)
    app.include_router(admin.router)

    # ── Static Files (instrumented) ───────────────────────────────────────
    # check_dir=False: the directory is created by lifespan, after construction
    file_server = StaticFiles(directory=app.state.static_root, html=True, check_dir=False)
    app.mount("/app", instrument(file_server, app.state.hit_counter), name="app")

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
