"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import distributors, health
from .config import settings
from .data.locations_repository import LocationRegistry, load_locations
from .services.distributors import DistributorService, DistributorStore


def _install_service(app: FastAPI, registry: LocationRegistry) -> None:
    app.state.distributor_service = DistributorService(registry, DistributorStore())


def create_app(registry: Optional[LocationRegistry] = None) -> FastAPI:
    """Build the application.

    When no registry is given, the configured locations file is loaded on
    startup; a missing or unreadable file aborts startup.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if not hasattr(app.state, "distributor_service"):
            logging.info(f"Loading locations from {settings.locations_file}")
            _install_service(app, load_locations(settings.locations_file))
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    if registry is not None:
        _install_service(app, registry)

    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(distributors.router, prefix=settings.api_prefix)
    return app


app = create_app()
