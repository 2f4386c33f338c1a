"""
Notes API — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its own NoteStore (app.state.note_store).
Who:   Called by uvicorn (uvicorn notes_api.main:app), by `python -m notes_api`
       and by the test suite (one fresh app, hence one fresh store, per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS (*)    │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────┐ ┌──────────────────────┐  │
    │  │ POST/GET /notes      │ │ GET/PUT/DELETE       │  │
    │  │                      │ │   /notes/{id}        │  │
    │  └──────────────────────┘ └──────────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ Creation→500 │ Payload→400    │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  State: app.state.note_store (in-memory, no disk)   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_api import __version__
from notes_api.config import settings
from notes_api.exceptions import NotesApiError
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_api.routes import notes
from notes_api.store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] notes_api.services.note_service: Note created: ...
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup logging. Notes live in memory only, so there is nothing to flush on exit."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("Notes API %s starting up...", __version__)
    logger.info("CORS origins: %s", ", ".join(settings.cors_origins_list))
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info(
        "Notes API shutting down; discarding %d in-memory notes",
        len(app.state.note_store),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def fail_response(status_code: int, message: str) -> JSONResponse:
    """The {"status": "fail", "message": ...} envelope used by every error path."""
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to fail envelopes.

    Handler hierarchy:
        NotesApiError subclasses → exc.status_code (404 not found, 500 creation)
        RequestValidationError   → 400 (body is not JSON or has wrong types)
        StarletteHTTPException   → framework status (unknown route 404, 405)
        Exception (fallback)     → 500, stack trace logged server-side only
    """

    @app.exception_handler(NotesApiError)
    async def handle_notes_api_error(request: Request, exc: NotesApiError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        else:
            logger.info("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return fail_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid request payload: %s", rid, exc.errors())
        return fail_response(400, "Invalid request payload")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "fail", "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return fail_response(500, "An unexpected error occurred. Please try again later.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: A FastAPI instance with an empty NoteStore, middleware,
             exception handlers and the /notes routes registered.
    """
    app = FastAPI(
        title="Notes API",
        description="In-memory CRUD service for notes (title, tags, body).",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.note_store = NoteStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: RequestID → Logging → CORS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `notes_api.main:app` to be importable
app = create_app()
