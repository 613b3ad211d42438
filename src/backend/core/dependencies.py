"""
FastAPI dependency functions.

The maintenance request store and the settings the app was built with live
on ``app.state`` so each application instance (and each test app) owns its
own copy.
"""

from fastapi import HTTPException, Request, status

from core.config import Settings
from repositories.maintenance_request_repository import MaintenanceRequestRepository


def get_request_repository(request: Request) -> MaintenanceRequestRepository:
    """Get the maintenance request store of the running app."""
    repository = getattr(request.app.state, "maintenance_repository", None)
    if repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Maintenance request store is not initialized",
        )
    return repository


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running app was created with."""
    return request.app.state.settings
