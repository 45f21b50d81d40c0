"""
MiniCRM Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn minicrm.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌────────────┐  │
    │  │AccessLog │→│   CORS   │→│ GZip │→│  Handler   │  │
    │  └──────────┘ └──────────┘ └──────┘ └────────────┘  │
    │                                                     │
    │  Routes (/api):                                     │
    │  companies · contacts · activities · deals ·        │
    │  dashboard                                          │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ no route→404 │ everything→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   configure logging, log the bound address
    Shutdown:  dispose the database engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from minicrm import __version__
from minicrm.config import settings
from minicrm.database import dispose_engine
from minicrm.exceptions import MiniCRMError, NotFoundError
from minicrm.middleware.access_log import AccessLogMiddleware, request_id_var
from minicrm.middleware.cors import CORSHeadersMiddleware
from minicrm.routes import activities, companies, contacts, dashboard, deals

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # Per-request access lines come from minicrm.access instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("MiniCRM Backend %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("MiniCRM Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _validation_message(exc: RequestValidationError) -> str:
    """First error of a body that could not be parsed, e.g. 'JSON decode error'."""
    errors = exc.errors()
    if not errors:
        return INTERNAL_ERROR
    first = errors[0]
    message = first.get("msg") or INTERNAL_ERROR
    detail = (first.get("ctx") or {}).get("error")
    if detail:
        message = f"{message}: {detail}"
    return message


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for the three observable outcomes.

    Handler hierarchy:
        NotFoundError            → 404 {"error": "<Entity> not found"}
        HTTPException 404/405    → 404 {"error": "Not found"}  (no matching route)
        RequestValidationError   → 500 {"error": ...}  (malformed or non-object body)
        MiniCRMError / Database  → 500 {"error": <driver message>}
        Exception (fallback)     → 500 {"error": str(exc) or "Internal server error"}

    Request bodies are not validated beyond parsing, so a body that cannot be
    parsed is a server failure like any other, not a 4xx.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # A path that matches no route (404) or a route with another method (405)
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = _validation_message(exc)
        logger.error("[%s] Unreadable request body on %s %s: %s",
                     rid, request.method, request.url.path, message)
        return JSONResponse(status_code=500, content={"error": message})

    @app.exception_handler(MiniCRMError)
    async def handle_app_error(request: Request, exc: MiniCRMError):
        rid = request_id_var.get("")
        logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message or INTERNAL_ERROR})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for errors raised outside the services.

        This handler runs outside the middleware stack, so the CORS headers
        are attached here directly.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or INTERNAL_ERROR},
            headers=settings.cors_headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="MiniCRM API",
        description="CRUD API for companies, contacts, activities and deals.",
        version=__version__,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
        openapi_url="/openapi.json" if settings.enable_docs else None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: AccessLog → CORS → GZip
    # GZip must see the handler's whole body to skip small responses
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(CORSHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(companies.router)
    app.include_router(contacts.router)
    app.include_router(activities.router)
    app.include_router(deals.router)
    app.include_router(dashboard.router)

    return app


app = create_app()
