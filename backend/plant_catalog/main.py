"""
Plant Catalog Backend - FastAPI Application Factory
====================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, the boundary error handler, route
       mounting, and startup sequencing in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn plant_catalog.main:app`), the `plant-catalog` script,
       and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  [Request ID] → [Logging]              │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────┐ ┌──────────┐ ┌───────────────┐  │
    │  │ /plants CRUD   │ │ GET /    │ │ GET /health   │  │
    │  └────────────────┘ └──────────┘ └───────────────┘  │
    │                                                     │
    │  Boundary error handler:                            │
    │  PlantCatalogError / anything else → {"err": ...}   │
    │  unmatched route or method        → bare 404        │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup (completes before uvicorn accepts connections):
    1. Initialize logging
    2. Build engine + PlantStore (unless one was injected)
    3. Create tables
    4. Seed initial plants
    Shutdown:
    1. Dispose the engine built in step 2
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from plant_catalog import __version__
from plant_catalog.config import settings
from plant_catalog.database import (
    build_engine,
    build_session_factory,
    create_tables,
    dispose_engine,
)
from plant_catalog.exceptions import PlantCatalogError
from plant_catalog.middleware.logging import RequestLoggingMiddleware
from plant_catalog.middleware.request_id import RequestIDMiddleware, request_id_var
from plant_catalog.routes import health, landing, plants
from plant_catalog.services.plant_store import PlantStore
from plant_catalog.services.seed import load_initial_plants

logger = logging.getLogger(__name__)

# Defaults applied by the boundary handler to whatever a failure leaves out
DEFAULT_ERROR_LOG = "Boundary error handler caught an unknown error"
DEFAULT_ERROR_STATUS = 500
DEFAULT_ERROR_MESSAGE: Dict[str, str] = {"err": "An internal server error occurred"}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once during startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Per-operation chatter from these libraries drowns out the access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Run startup in a fixed order, then serve.

    uvicorn does not accept connections until this yields, so requests never
    observe a half-seeded catalog. Database failures at startup are logged,
    not raised: the process stays up and reports them through /health and
    500 responses.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Plant Catalog %s starting up...", __version__)

    engine = None
    store: Optional[PlantStore] = getattr(app.state, "plant_store", None)

    if store is None:
        engine = build_engine()
        store = PlantStore(build_session_factory(engine))
        app.state.plant_store = store

        if settings.db_create_tables:
            try:
                await create_tables(engine)
            except (SQLAlchemyError, OSError) as e:
                logger.error("Database connection error: %s", e)

    if settings.seed_on_startup:
        await load_initial_plants(store)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Plant Catalog shutting down...")
    if engine is not None:
        await dispose_engine(engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Boundary Error Handler
# ══════════════════════════════════════════════════════════════════════════

def format_failure(request: Request, exc: PlantCatalogError) -> JSONResponse:
    """
    Turn a structured failure into the HTTP response.

    Missing fields fall back to DEFAULT_ERROR_LOG / _STATUS / _MESSAGE. The
    log line and the request method and path go to the server log; only the
    message reaches the client.
    """
    log = exc.log or DEFAULT_ERROR_LOG
    status = exc.status or DEFAULT_ERROR_STATUS
    message = exc.message or DEFAULT_ERROR_MESSAGE

    rid = request_id_var.get("")
    logger.error("[%s] %s", rid, log)
    logger.error("[%s] Request Method: %s", rid, request.method)
    logger.error("[%s] Request URL: %s", rid, request.url.path)

    return JSONResponse(status_code=status, content=message)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Route every failure through format_failure.

    Handler map:
        PlantCatalogError          → its own status / message
        RequestValidationError     → 400, default message (malformed JSON only)
        404 / 405 from routing     → bare 404, empty body
        other HTTPException        → its status, {"err": detail}
        Exception (fallback)       → 500 default message, traceback logged
    """

    @app.exception_handler(PlantCatalogError)
    async def handle_plant_catalog_error(request: Request, exc: PlantCatalogError):
        return format_failure(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body could not be parsed as JSON; the client gets the default message."""
        return format_failure(
            request,
            PlantCatalogError(log=f"Malformed request body: {exc.errors()}", status=400),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods both fall through to a bare 404
        if exc.status_code in (404, 405):
            return Response(status_code=404)
        return format_failure(
            request,
            PlantCatalogError(
                log=f"HTTP {exc.status_code}: {exc.detail}",
                status=exc.status_code,
                message={"err": str(exc.detail)},
            ),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Anything a handler failed to convert gets the full default triple."""
        logger.error("Unexpected error: %s", exc, exc_info=True)
        return format_failure(request, PlantCatalogError())


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[PlantStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: PlantStore to serve from. When omitted the lifespan builds one
               from settings.database_url at startup.
    """
    app = FastAPI(
        title="Plant Catalog API",
        description="Create, read, update and delete plant records by name.",
        version=__version__,
        lifespan=lifespan,
    )

    if store is not None:
        app.state.plant_store = store

    # Middleware executes in REVERSE order of addition: Request ID runs first
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(landing.router)
    app.include_router(plants.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `plant_catalog.main:app` to be importable
app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on BACKEND_HOST:BACKEND_PORT."""
    import uvicorn

    uvicorn.run(
        "plant_catalog.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
