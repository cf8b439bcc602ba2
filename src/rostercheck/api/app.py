"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from rostercheck.api.routes import health, imports
from rostercheck.core.config import AppSettings
from rostercheck.core.logging import configure_logging
from rostercheck.core.protocols import IArchiveStore
from rostercheck.persistence import create_archive_store
from rostercheck.session.rehydrator import ImportSession


def create_app(settings: AppSettings | None = None, store: IArchiveStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Wire the import session and restore any persisted archive."""
        app_settings = settings or AppSettings()
        configure_logging(app_settings.log_level)
        session = ImportSession(
            store=store if store is not None else create_archive_store(app_settings),
            settings=app_settings,
        )
        app.state.settings = app_settings
        app.state.session = session
        await session.restore()
        yield

    app = FastAPI(
        title="Roster Import Verification",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(imports.router, prefix="/imports")
    return app
