"""
Application factory for FastAPI.

This module provides the create_app() function that creates and configures
the FastAPI application instance.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from api.v1 import api_router
from app.routes import health_router, root_router
from core.config import Settings, settings as default_settings
from core.lifespan import lifespan
from core.middleware import CorrelationIdMiddleware
from db.seed_data import demo_requests
from repositories.maintenance_request_repository import MaintenanceRequestRepository


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Creates the FastAPI application with its middleware, routes and an
    in-memory maintenance request store.

    Args:
        app_settings: Settings to build from (defaults to the global settings)

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app_settings = app_settings or default_settings

    # Rate limiter instance
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[app_settings.rate_limit.default_limit],
        enabled=app_settings.rate_limit.enabled,
    )

    app = FastAPI(
        title=app_settings.api.app_name,
        version=app_settings.api.app_version,
        description="Filtering, pagination and update commands for property maintenance requests",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.settings = app_settings

    # Request store, seeded with the demo tickets unless disabled
    records = demo_requests() if app_settings.seed.load_demo_requests else None
    app.state.maintenance_repository = MaintenanceRequestRepository(records)

    # Add rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(CorrelationIdMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Correlation-ID"],
        expose_headers=["X-Total-Count", "X-Page", "X-Per-Page", "X-Correlation-ID"],
    )

    # Include routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(api_router, prefix=app_settings.api.api_v1_prefix)

    return app
