"""
Employee API: FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the database engine and session factory, registers
       middleware, exception handlers, and routers, and returns the app.
Who:   uvicorn (`uvicorn employee_api.main:app`) and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ Access (req ID + log)    │→│ CORS            │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ /api/employees (CRUD)    │ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ PersistenceError→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the employees table if configured
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from employee_api import __version__
from employee_api.config import Settings, settings as default_settings
from employee_api.database import (
    build_engine,
    build_session_factory,
    create_tables,
    dispose_engine,
)
from employee_api.exceptions import EmployeeAPIError, PersistenceError, ValidationError
from employee_api.middleware.access import AccessMiddleware, request_id_var
from employee_api.routes import employees, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    Called once from the lifespan, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that log every request/statement at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("Employee API %s starting up...", __version__)

    if app_settings.db_create_tables:
        await create_tables(app.state.engine)
        logger.info("Ensured table 'employees' exists")

    logger.info(
        "Serving employees at http://%s:%d%s/",
        app_settings.backend_host,
        app_settings.backend_port,
        app_settings.employees_prefix,
    )

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Employee API shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        PersistenceError        → 500 Internal Server Error (generic message)
        EmployeeAPIError (base) → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Stack traces, SQL, and driver messages are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(request: Request, exc: PersistenceError):
        rid = request_id_var.get("")
        logger.error("[%s] Persistence error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(EmployeeAPIError)
    async def handle_app_error(request: Request, exc: EmployeeAPIError):
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

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app from; defaults to the
                      environment-loaded module settings.

    The engine and session factory live on app.state, so each app instance
    owns its own connection pool.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Employee API",
        description="CRUD service for employee records backed by a relational table.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.engine = build_engine(app_settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: Access → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(AccessMiddleware, employees_prefix=app_settings.employees_prefix)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(employees.router, prefix=app_settings.employees_prefix)
    app.include_router(health.router)

    return app


# uvicorn entry point: `uvicorn employee_api.main:app`
app = create_app()
