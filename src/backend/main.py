"""
Main FastAPI application entry point.
"""

from app import create_app

# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    from core.config import settings
    from core.uvicorn_logging import build_uvicorn_log_config

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.api.debug,
        # The request store is in-memory, so one worker holds the only copy
        workers=1,
        log_level=settings.logging.level.lower(),
        log_config=build_uvicorn_log_config(settings.logging.level),
        access_log=True,
        timeout_graceful_shutdown=10,
        server_header=False,
    )
