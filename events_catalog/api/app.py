"""FastAPI application configuration module."""

import asyncio
import logging
import os
import signal
from contextlib import asynccontextmanager
from functools import partial
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT # Environment must be imported first
from ..config.cors import CORS_CONFIG
from ..utils.logging_config import setup_logging
from ..db import Database, DatabaseConfig, EventRepository
from .routes import events, health

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
INTERNAL_ERROR = "Internal server error"


def handle_unrecovered_fault(app: FastAPI, loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
    """
    Event loop exception handler for faults outside any request.

    Logs the fault, marks the application as faulted and asks the server to
    shut down; uvicorn closes its listeners on SIGTERM before exiting.
    """
    error = context.get("exception")
    logger.critical(f"Unrecovered asynchronous fault: {context.get('message')} {error!r}")
    app.state.fatal_fault = True
    os.kill(os.getpid(), signal.SIGTERM)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    try:
        if app.state.database is None:
            app.state.database = Database(DatabaseConfig())
        app.state.database.ensure_tables_exist()
        app.state.event_repository = EventRepository(app.state.database)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise

    asyncio.get_running_loop().set_exception_handler(partial(handle_unrecovered_fault, app))
    yield
    # Shutdown
    app.state.database.dispose()
    logger.info("Database connections closed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors in the response envelope."""
    message = exc.detail
    status_code = exc.status_code
    headers = getattr(exc, "headers", None)
    if status_code == status.HTTP_404_NOT_FOUND and "endpoint" not in request.scope:
        # No route matched the request path
        message = ROUTE_NOT_FOUND
    elif status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        # Known path, but no route for this method
        status_code = status.HTTP_404_NOT_FOUND
        headers = None
        message = ROUTE_NOT_FOUND
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and wrongly typed fields are client faults."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid request: " + "; ".join(problems)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": INTERNAL_ERROR},
    )


def create_application(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Storage client to serve from. When omitted, one is built from
                  the environment configuration at startup.
    """
    app = FastAPI(
        title="Events Catalog API",
        description="API for listing, searching and managing catalog events",
        version="1.0.0",
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )
    app.state.database = database
    app.state.fatal_fault = False

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    # Error envelope
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers with prefix
    app.include_router(events.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    return app

# Create the application instance
app = create_application()
