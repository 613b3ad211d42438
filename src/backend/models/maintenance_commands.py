"""
Update commands for maintenance requests.

Each command is a tagged variant (``kind``) naming exactly the fields it
changes. MaintenanceRequestService applies them by matching the record id
and replacing the whole record.
"""
from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import Field, field_validator, model_validator

from core.schema_base import FrozenSchemaModel
from models.model_enum import MaintenanceCategory, MaintenanceStatus


class CostRange(FrozenSchemaModel):
    """Estimated cost bounds quoted by a technician."""

    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)

    @model_validator(mode="after")
    def check_bounds(self):
        if self.max < self.min:
            raise ValueError("cost range max must not be below min")
        return self


class TimeWindow(FrozenSchemaModel):
    """Arrival window for a scheduled visit, as display strings (e.g. "9:00 AM")."""

    start: str = Field(..., min_length=1)
    end: str = Field(..., min_length=1)


class CreateRequest(FrozenSchemaModel):
    """Submit a new maintenance request."""

    kind: Literal["create"] = "create"
    title: str = Field(..., max_length=200)
    description: str = ""
    category: MaintenanceCategory = MaintenanceCategory.OTHER
    # Free-form: the submission form also sends "medium"
    priority: str = "normal"
    property: Optional[str] = None
    tenant: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        return v.strip()


class UpdateStatus(FrozenSchemaModel):
    """Move a request to another status."""

    kind: Literal["update_status"] = "update_status"
    request_id: str
    status: MaintenanceStatus
    notes: Optional[str] = Field(None, max_length=2000)


class AssignTechnician(FrozenSchemaModel):
    """Assign a technician; the request moves to in-progress."""

    kind: Literal["assign_technician"] = "assign_technician"
    request_id: str
    technician_id: str = Field(..., min_length=1)
    technician_name: str = Field(..., min_length=1)
    due_date: Optional[date] = None
    cost_range: Optional[CostRange] = None
    notes: Optional[str] = Field(None, max_length=2000)


class ScheduleService(FrozenSchemaModel):
    """Book a service visit; the request moves to scheduled."""

    kind: Literal["schedule_service"] = "schedule_service"
    request_id: str
    scheduled_date: date
    scheduled_time: Optional[str] = None
    time_window: Optional[TimeWindow] = None
    timezone: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=2000)


MaintenanceCommand = Annotated[
    Union[CreateRequest, UpdateStatus, AssignTechnician, ScheduleService],
    Field(discriminator="kind"),
]
