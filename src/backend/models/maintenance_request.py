"""
Maintenance request record.

Records are immutable: a change of status, assignment or schedule produces
a new record with the same id that replaces the old one in the store.
"""
from datetime import date
from typing import Optional

from pydantic import Field

from core.schema_base import FrozenSchemaModel
from models.model_enum import (
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
)


class MaintenanceRequest(FrozenSchemaModel):
    """One maintenance ticket as shown in the owner maintenance view."""

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    property: str
    tenant: str
    category: MaintenanceCategory
    priority: MaintenancePriority
    status: MaintenanceStatus
    date_submitted: date
    last_updated: date
    scheduled_date: Optional[date] = None
    assigned_technician: Optional[str] = None
