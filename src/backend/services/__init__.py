"""
Business logic services for the maintenance request list.
"""
from .maintenance_request_service import (
    MaintenanceRequestNotFoundError,
    MaintenanceRequestService,
)

__all__ = [
    "MaintenanceRequestService",
    "MaintenanceRequestNotFoundError",
]
