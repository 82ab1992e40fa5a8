# src/epitome_codex/main.py
"""Main entry point for the Epitome Codex application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from epitome_codex.api.v1 import (
    admin_router,
    builds_router,
    classes_router,
    guides_router,
    items_router,
    mobs_router,
    stats_router,
    tools_router,
    votes_router,
)
from epitome_codex.core.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Epitome Codex API",
    description="Community wiki, build planner and voting API for Epitome",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(builds_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")
app.include_router(stats_router, prefix="/api/v1")
app.include_router(classes_router, prefix="/api/v1")
app.include_router(tools_router, prefix="/api/v1")
app.include_router(guides_router, prefix="/api/v1")
app.include_router(items_router, prefix="/api/v1")
app.include_router(mobs_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Community wiki, build planner and voting API for Epitome",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("epitome_codex.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
