"""
Root endpoint handler.
"""

from fastapi import APIRouter, Depends

from core.config import Settings
from core.dependencies import get_app_settings

router = APIRouter()


@router.get("/")
async def root(app_settings: Settings = Depends(get_app_settings)):
    """Root endpoint."""
    return {
        "name": app_settings.api.app_name,
        "version": app_settings.api.app_version,
        "status": "operational",
        "docs": "/api/docs",
    }
