"""
School Records API: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the Database handle, the repositories and the
       services, stores them on app.state, then registers middleware,
       exception handlers and routers.
Who:   uvicorn (uvicorn school_api.main:app) and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  Routes:  /schools  /classes  /students  /health    │
    │                                                     │
    │  Exception Handlers:                                │
    │    bad id/body → 400 │ NotFound → 404 │ DB → 500    │
    │                                                     │
    │  app.state: database, *_service                     │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → create tables if absent → ready
    Shutdown: dispose the engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from school_api import __version__
from school_api.config import Settings, settings as default_settings
from school_api.database import Database
from school_api.exceptions import DatabaseError, NotFoundError, ValidationError
from school_api.middleware.logging import RequestLoggingMiddleware
from school_api.middleware.request_id import RequestIDMiddleware, request_id_var
from school_api.repositories import ClassRepository, SchoolRepository, StudentRepository
from school_api.routes import classes, health, schools, students
from school_api.services.entity_service import ClassService, SchoolService, StudentService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once, at startup.

    Format: 2024-01-15T12:00:00 [INFO] school_api.repositories.base: Created school 1
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # These log every statement/connection at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(config.log_level)
    logger.info("School Records API %s starting up...", __version__)

    if config.db_auto_create_tables:
        await database.create_tables()

    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)

    yield

    logger.info("School Records API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details: Optional[dict] = None) -> dict:
    body = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the shared error body.

        RequestValidationError → 400 (FastAPI's default would be 422)
        ValidationError        → 400
        NotFoundError          → 404
        DatabaseError          → 500, message carries the store's error text
        Exception              → 500, generic message, stack trace logged
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Undecodable path id or JSON body; the handler never ran."""
        errors = exc.errors()
        path_params = [str(e["loc"][-1]) for e in errors if e.get("loc") and e["loc"][0] == "path"]
        if path_params:
            message = f"Invalid path identifier '{path_params[0]}': expected an unsigned integer"
        else:
            message = "Invalid input"
        details = {
            "errors": [
                {"loc": [str(part) for part in e.get("loc", ())], "msg": e.get("msg", "")}
                for e in errors
            ]
        }
        logger.warning("[%s] Bad request on %s: %s", request_id_var.get(""), request.url.path, message)
        return JSONResponse(status_code=400, content=_error_body("validation_error", message, details))

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=_error_body("not_found", exc.message))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(status_code=500, content=_error_body("database_error", exc.message))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config:   Settings to use; defaults to the environment-loaded settings
        database: Store handle to use; defaults to one built from config.database_url

    Each call builds its own Database and services, so tests can create
    isolated apps against their own databases.
    """
    config = config or default_settings
    database = database or Database(config=config)

    app = FastAPI(
        title="School Records API",
        description="Create, read, update and delete schools, classes and students.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Wire the layers ───────────────────────────────────────────────────
    app.state.settings = config
    app.state.database = database
    app.state.school_service = SchoolService(SchoolRepository(database))
    app.state.class_service = ClassService(ClassRepository(database))
    app.state.student_service = StudentService(StudentRepository(database))

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(schools.router)
    app.include_router(classes.router)
    app.include_router(students.router)
    app.include_router(health.router)

    return app


# uvicorn expects `school_api.main:app` to be importable
app = create_app()
