#!/usr/bin/env python3
"""
Social Capital CRM network API.

FastAPI application serving the network view of the CRM frontend:
- Network graph data and analytics (clusters, central and isolated people)
- Connection paths between people
- Focused graphs around a person
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from social_capital.logging_config import configure_logging, get_logger

from .dependencies import authenticate_pb
from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()

    if not settings.skip_pb_auth:
        await authenticate_pb()
    else:
        logger.warning("Skipping PocketBase authentication (SKIP_PB_AUTH=true)")

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Social Capital CRM API",
        description="Relationship network analytics for the personal CRM",
        lifespan=lifespan,
    )

    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import network

    app.include_router(network.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "social-capital-api"}

    return app


# Create app instance for uvicorn
app = create_app()
