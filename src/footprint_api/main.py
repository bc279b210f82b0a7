# src/footprint_api/main.py
"""Main entry point for the Footprint application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from footprint_api.api.v1 import (
    content_router,
    footprints_router,
    rooms_router,
    tiles_router,
    users_router,
)
from footprint_api.core.settings import settings
from footprint_api.services.errors import FootprintError, UnavailableError

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Serial-numbered identities with ordered, room-grouped tiles",
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
app.include_router(users_router, prefix="/api/v1")
app.include_router(footprints_router, prefix="/api/v1")
app.include_router(content_router, prefix="/api/v1")
app.include_router(tiles_router, prefix="/api/v1")
app.include_router(rooms_router, prefix="/api/v1")


@app.exception_handler(FootprintError)
async def footprint_error_handler(request: Request, exc: FootprintError) -> JSONResponse:
    """Render domain errors as ``{"error": ..., "kind": ...}``."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(OperationalError)
async def store_unavailable_handler(request: Request, exc: OperationalError) -> JSONResponse:
    """Map lost connections and locked databases to a retryable 503."""
    logger.error("Store unavailable on %s %s: %s", request.method, request.url.path, exc)
    error = UnavailableError("Store temporarily unavailable")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
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
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("footprint_api.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
