"""
Maintenance request schemas for API validation and serialization.
"""
from datetime import date
from typing import List, Optional

from pydantic import Field

from core.schema_base import HTTPSchemaModel
from models.filter_criteria import ActiveFilter
from models.maintenance_commands import CostRange, TimeWindow
from models.maintenance_request import MaintenanceRequest
from models.model_enum import MaintenanceCategory, MaintenanceStatus, StatusTab


class MaintenanceRequestCreate(HTTPSchemaModel):
    """Schema for submitting a new maintenance request."""
    title: str = Field(..., min_length=1, max_length=200, description="Brief summary of the issue")
    description: str = Field("", description="Details of the issue")
    category: MaintenanceCategory = MaintenanceCategory.OTHER
    priority: str = Field("normal", description="low, normal/medium, urgent or emergency")
    property: Optional[str] = None
    tenant: Optional[str] = None


class StatusUpdateRequest(HTTPSchemaModel):
    """Schema for updating a maintenance request's status."""
    status: MaintenanceStatus
    notes: Optional[str] = Field(None, max_length=2000)


class AssignTechnicianRequest(HTTPSchemaModel):
    """Schema for assigning a technician to a request."""
    technician_id: str = Field(..., min_length=1, description="ID of the technician to assign")
    technician_name: str = Field(..., min_length=1)
    due_date: Optional[date] = None
    cost_range: Optional[CostRange] = None
    notes: Optional[str] = Field(None, max_length=2000)


class ScheduleServiceRequest(HTTPSchemaModel):
    """Schema for scheduling a service visit."""
    scheduled_date: date
    scheduled_time: Optional[str] = None
    time_window: Optional[TimeWindow] = None
    timezone: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=2000)


class MaintenanceCommandResponse(HTTPSchemaModel):
    """Updated record plus the confirmation shown to the user."""
    request: MaintenanceRequest
    message: str


class MaintenanceRequestPage(HTTPSchemaModel):
    """Schema for one page of the filtered maintenance request list."""
    items: List[MaintenanceRequest]
    total: int
    total_unfiltered: int
    page: int
    per_page: int
    total_pages: int
    start_item: int
    end_item: int
    active_tab: StatusTab
    active_filters: List[ActiveFilter] = []
    has_active_filters: bool = False


class FilterOption(HTTPSchemaModel):
    """One selectable value with its display label."""
    value: str
    label: str
    description: Optional[str] = None


class MaintenanceFilterOptions(HTTPSchemaModel):
    """Values offered by the list's filter controls."""
    properties: List[str]
    tabs: List[FilterOption]
    statuses: List[FilterOption]
    priorities: List[FilterOption]
    categories: List[FilterOption]
