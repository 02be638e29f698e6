"""Pledge Wall API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PledgeWallError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Pledge store configured on startup via lifespan; its connection opens lazily

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - auto_create_schema only for dev/SQLite; production schema comes from alembic
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pledgewall.api.error_handlers import register_error_handlers
from pledgewall.api.routes import health, pledges, taxonomy
from pledgewall.config import get_settings
from pledgewall.infrastructure import pledge_store_factory
from pledgewall.infrastructure.observability import setup_logging
from pledgewall.infrastructure.sql_pledge_store import SqlPledgeStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = pledge_store_factory.init_store(settings)
    if settings.auto_create_schema and isinstance(store, SqlPledgeStore):
        await store.db_manager.create_schema()
    logger.info("Pledge Wall API started", extra={"backend": store.backend_name})
    yield
    if isinstance(store, SqlPledgeStore):
        await store.db_manager.dispose()
    logger.info("Pledge Wall API shutting down")


app = FastAPI(
    title="Pledge Wall API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(pledges.router)
app.include_router(taxonomy.router)

register_error_handlers(app)

# Static files — serves the pledge form build in production
# ADR: mounted AFTER API routes so /api/v1/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
