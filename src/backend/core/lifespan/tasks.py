"""
Lifespan startup and shutdown task functions.

Each function handles one startup responsibility.
"""

import logging


async def initialize_logging(settings, log_config):
    """Setup logging configuration."""
    from core.logging_config import setup_logging

    logger = logging.getLogger("main")
    setup_logging(log_config)
    logger.info("Starting %s v%s...", settings.api.app_name, settings.api.app_version)


async def log_cors_configuration(settings, logger):
    """Log CORS configuration for debugging."""
    logger.info(f"CORS Allowed Origins: {settings.cors.origins}")


async def ensure_request_store(app, settings):
    """Create the in-memory request store if the app has none yet."""
    from db.seed_data import demo_requests
    from repositories.maintenance_request_repository import MaintenanceRequestRepository

    logger = logging.getLogger("main")
    repository = getattr(app.state, "maintenance_repository", None)
    if repository is None:
        records = demo_requests() if settings.seed.load_demo_requests else None
        repository = MaintenanceRequestRepository(records)
        app.state.maintenance_repository = repository
    logger.info(f"Request store ready with {len(repository)} maintenance requests")
