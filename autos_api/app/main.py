"""
Main entrypoint for the Autos API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly, e.g.::

    uvicorn autos_api.app.main:app --reload

The application title, version and route prefix are provided via
``Settings`` from ``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 Bad Request."""
    logger = logging.getLogger(__name__)
    logger.warning(
        "Request validation failed for %s %s: %d errors",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    # One message string, the same shape service errors produce.
    detail = "; ".join(
        "{}: {}".format(
            " -> ".join(str(loc) for loc in error.get("loc", [])),
            error.get("msg", "Unknown validation error"),
        )
        for error in exc.errors()
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file if needed and applies migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers exception handlers and includes the
    versioned API router under ``settings.api_prefix``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


app = create_app()
