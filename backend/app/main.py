"""Wellnote API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WellnoteError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Settings load at import: without JWT_SECRET the app refuses to start
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Three error handler layers: WellnoteError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import account, auth, contacts, health, journal
from app.config import get_settings
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_tables()
    logger.info("Wellnote API started")
    yield
    await manager.dispose()
    logger.info("Wellnote API shutting down")


settings = get_settings()

app = FastAPI(title="Wellnote API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(account.router)
app.include_router(journal.router)
app.include_router(contacts.router)

register_error_handlers(app)
