"""
Board Gateway - FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn gateway.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌────────┐ ┌──────────────┐ ┌──────────┐ ┌──────────┐  │
    │  │  CORS  │→│ Sec. Headers │→│  Req ID  │→│ Logging  │  │
    │  └────────┘ └──────────────┘ └──────────┘ └──────────┘  │
    │                                                          │
    │  Routes (/v1):                                           │
    │  users · content · announcements · registered-emails     │
    │  auth/login · /health                                    │
    │                                                          │
    │  Exception Handlers:                                     │
    │  Validation→400 │ Write→400 │ Auth→401 │ NotFound→404    │
    │  Database→500   │ anything else→500 (via Req ID)         │
    └──────────────────────────────────────────────────────────┘

Every error body has the same shape: {"error": "<message>", "request_id": "<id>"}.
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

from gateway import __version__
from gateway.config import settings
from gateway.database import dispose_engine
from gateway.exceptions import GatewayError
from gateway.middleware.logging import RequestLoggingMiddleware
from gateway.middleware.request_id import (
    UNEXPECTED_ERROR_MESSAGE,
    RequestIDMiddleware,
    request_id_var,
)
from gateway.middleware.security_headers import SecurityHeadersMiddleware
from gateway.routes import announcements, auth, content, health, registered_emails, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (captured by the container runtime)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries that log every operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:  configure logging, validate settings, log where the API lives.
    Shutdown: dispose the database engine.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Board Gateway %s starting up (%s)...", __version__, settings.environment)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Not fatal: /health keeps reporting the database state
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d%s", settings.backend_host, settings.backend_port, settings.docs_url)
    logger.info("=" * 60)

    yield

    logger.info("Board Gateway shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Build the uniform error body used by every handler."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "request_id": request_id_var.get("")},
        headers=headers,
    )


def format_validation_errors(exc: RequestValidationError) -> str:
    """
    Turn FastAPI's error list into one readable sentence, e.g.
    "Invalid request: body.ids.0: Input should be a valid integer".
    """
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}" if location else err.get("msg", ""))
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request."


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP status codes and the uniform error body.

    Handler hierarchy:
        GatewayError subclasses   → exc.status_code (400 / 401 / 404 / 500)
        RequestValidationError    → 400 (schema problems in path or body)
        HTTPException             → its own status (e.g. 404 unknown route)
        Exception (fallback)      → 500

    Details in exc.context are logged server-side only.
    """

    @app.exception_handler(GatewayError)
    async def handle_gateway_error(request: Request, exc: GatewayError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.warning("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc)
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace goes to the log only; the client gets a generic 500."""
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True)
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Board Gateway API",
        description=(
            "HTTP gateway over the hosted Postgres database: CRUD for users, content "
            "posts, announcements and registered emails, plus password login."
        ),
        version=__version__,
        docs_url=settings.docs_url,
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: CORS → SecurityHeaders → RequestID → Logging.
    # RequestID answers unhandled exceptions, so the two outer layers still
    # decorate that 500.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    wildcard = "*" in settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if wildcard else settings.cors_origins_list,
        allow_credentials=not wildcard,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(users.router)
    app.include_router(content.router)
    app.include_router(announcements.router)
    app.include_router(registered_emails.router)
    app.include_router(auth.router)
    app.include_router(health.router)

    return app


app = create_app()
