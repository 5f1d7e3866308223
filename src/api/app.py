"""
FastAPI application factory.

* Registers routes for the status check and schools.
* Owns the database engine: builds it from settings unless one is passed in,
  creates tables on startup, disposes the engine on shutdown.
* Applies CORS and rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.ext.asyncio import AsyncEngine

from src.api.errors import catch_unhandled_errors, register_exception_handlers
from src.api.middleware import limiter
from src.api.routes import schools, status
from src.config import Settings, settings as default_settings
from src.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)

logging.basicConfig(level=default_settings.log_level)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None, engine: Optional[AsyncEngine] = None
) -> FastAPI:
    settings = settings or default_settings
    owns_engine = engine is None
    if engine is None:
        engine = build_engine(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create tables on startup; release the pool on shutdown."""
        if settings.create_tables_on_startup:
            await create_tables(engine)
        yield
        if owns_engine:
            await engine.dispose()
            logger.info("Database engine disposed")

    app = FastAPI(
        title="School Management API",
        description=(
            "Stores schools with their coordinates and lists them sorted by "
            "great-circle distance from the caller."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Added first so CORSMiddleware wraps it
    app.middleware("http")(catch_unhandled_errors)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(app)

    # Routers
    app.include_router(status.router)
    app.include_router(schools.router)

    return app
