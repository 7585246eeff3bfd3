"""
FastAPI application factory and entry point.

This module creates and configures the FastAPI application:
  1. Logging — configured once from settings.LOG_LEVEL
  2. Lifespan manager — creates tables on startup, disposes the engine on shutdown
  3. CORS middleware — lets the web client call the API from its own origin
  4. Exception handlers — maps domain errors to {"message": ...} responses
  5. Router registration — mounts the cards endpoints under settings.API_PREFIX

Running locally:
    uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import models  # noqa: F401  (registers every table on Base.metadata)
from app.config import settings
from app.database import engine, Base, ensure_sqlite_directory
from app.exceptions import register_exception_handlers
from app.routers import cards

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup:
      Creates all tables that don't exist yet. There are no migrations;
      the schema is whatever the models declare.

    Shutdown:
      Disposes of the database engine, closing all connections.
    """
    # --- Startup ---
    ensure_sqlite_directory(settings.DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    yield
    # --- Shutdown ---
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Card records API: list, create and delete cards per user",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(cards.router, prefix=f"{settings.API_PREFIX}/cards", tags=["Cards"])


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness probe for load balancers and container orchestrators."""
    return {"status": "ok", "version": settings.APP_VERSION}
