"""
Repository layer for maintenance request storage.

Data access is isolated from business logic; the store is in-memory.
"""

from repositories.maintenance_request_repository import MaintenanceRequestRepository

__all__ = ["MaintenanceRequestRepository"]
