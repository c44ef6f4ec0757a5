"""
FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from biotrack.api.errors import register_exception_handlers
from biotrack.api.v1 import measures, users
from biotrack.config import configure_logging, settings
from biotrack.db.database import create_tables

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables on startup when configured to."""
    if settings.create_tables_on_startup:
        create_tables()
    logger.info(f"[STARTUP] {settings.api_title} ready")
    yield


app = FastAPI(
    title=settings.api_title,
    description="Body measurement tracking API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(measures.router, prefix="/measures", tags=["measures"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "BioTrack API"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
