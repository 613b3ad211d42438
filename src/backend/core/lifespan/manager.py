"""
Application lifespan manager.

This module provides the lifespan context manager that handles
startup and shutdown events for the FastAPI application.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from core.config import settings as default_settings
from core.logging_config import LogConfig, stop_queue_listener
from . import tasks


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    settings = getattr(app.state, "settings", None) or default_settings
    app.state.settings = settings

    # Setup logging
    log_config = LogConfig(**settings.logging.log_config)
    await tasks.initialize_logging(settings, log_config)

    logger = logging.getLogger("main")

    # Log CORS configuration for debugging
    await tasks.log_cors_configuration(settings, logger)

    # Make sure the request store exists (the factory normally creates it)
    await tasks.ensure_request_store(app, settings)

    yield

    # Shutdown
    logger.info("Shutting down %s...", settings.api.app_name)

    # Stop logging queue listener
    stop_queue_listener()
