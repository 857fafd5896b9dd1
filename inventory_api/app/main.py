"""
Main entrypoint for the Inventory API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app``::

    uvicorn inventory_api.app.main:app --reload

The application title and version come from ``Settings`` in
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file on first start and brings the schema
    # up to date.
    version = init_db()
    logger.info("Database %s at schema version %s", get_database_path(), version)
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file, debug=settings.debug)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
