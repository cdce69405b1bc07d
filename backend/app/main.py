"""
FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.api.router import api_router
from app.database import Database
from app.errors import register_error_handlers

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the application around a storage client.

    The database is opened when the application starts and closed when it
    shuts down. An application that builds its own database from settings
    also configures logging on startup.
    """
    owns_database = database is None
    if database is None:
        database = Database(
            settings.database_url,
            echo=settings.sql_echo,
            create_tables=settings.create_tables,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_database:
            configure_logging()
        database.open()
        logger.info("%s %s started", settings.app_name, settings.app_version)
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Personal budget tracker for income and expense transactions",
        lifespan=lifespan,
    )
    app.state.database = database

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(dict.fromkeys([*settings.cors_origins, settings.frontend_url])),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    def read_root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }

    return app


app = create_app()
