"""Jobly API entrypoints."""

from __future__ import annotations

import logging

import uvicorn

from jobly_backend.api import create_api
from jobly_backend.database import BaseSchema, DatabaseService
from jobly_backend.settings import get_settings

logger = logging.getLogger(__name__)

app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    uvicorn.run(
        "jobly_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        log_config=None,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)


def init_db() -> None:
    """Create any missing tables directly from the schemas.

    Intended for local SQLite databases; deployed databases are managed by
    the alembic migrations.
    """
    database = DatabaseService()
    try:
        BaseSchema.metadata.create_all(database.engine)
    finally:
        database.dispose()
    logger.info("Created tables: %s", ", ".join(sorted(BaseSchema.metadata.tables)))
