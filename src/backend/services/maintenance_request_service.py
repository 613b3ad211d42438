"""
Maintenance request service.

Applies update commands to the request store and renders list views.
Each mutating command replaces the target record by id and yields a
confirmation message for the portal.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from core.decorators import handle_operation_exceptions, log_operation
from core.logging_config import MaintenanceLogger
from models.maintenance_commands import (
    AssignTechnician,
    CostRange,
    CreateRequest,
    ScheduleService,
    UpdateStatus,
)
from models.maintenance_constants import normalize_submitted_priority
from models.maintenance_request import MaintenanceRequest
from models.model_enum import MaintenanceStatus
from repositories.maintenance_request_repository import MaintenanceRequestRepository
from services.maintenance_view_service import MaintenanceView, MaintenanceViewState

# Module-level logger using __name__
logger = logging.getLogger(__name__)
activity_logger = MaintenanceLogger("requests")


class MaintenanceRequestNotFoundError(Exception):
    """Exception raised when a maintenance request id is unknown."""

    def __init__(self, request_id: str):
        self.request_id = request_id
        super().__init__(f"Maintenance request {request_id} not found")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an applied command."""

    request: MaintenanceRequest
    message: str


def format_us_date(value: date) -> str:
    """Short US date, e.g. 5/20/2023."""
    return f"{value.month}/{value.day}/{value.year}"


def _format_amount(amount: float) -> str:
    # Up to two decimals without trailing zeros: 100 -> "100", 100.5 -> "100.5"
    return f"{amount:.2f}".rstrip("0").rstrip(".")


def _format_cost_range(cost_range: Optional[CostRange]) -> str:
    if cost_range is None:
        return ""
    return f" (${_format_amount(cost_range.min)} - ${_format_amount(cost_range.max)})"


class MaintenanceRequestService:
    """Service for maintenance request commands and list views."""

    @staticmethod
    @log_operation("maintenance request listing")
    def list_view(
        repository: MaintenanceRequestRepository,
        state: MaintenanceViewState,
    ) -> MaintenanceView:
        """Render the list view for ``state`` over the current records."""
        view = state.render(repository.list_all())
        activity_logger.filters_applied(
            total=view.total_unfiltered,
            matched=view.page.total,
            active_tab=state.criteria.active_tab.value,
            active_filters=len(view.active_filters),
        )
        return view

    @staticmethod
    @handle_operation_exceptions(
        "get_maintenance_request", expected=(MaintenanceRequestNotFoundError,)
    )
    def get_request(
        repository: MaintenanceRequestRepository,
        request_id: str,
    ) -> MaintenanceRequest:
        """
        Get a maintenance request by id.

        Raises:
            MaintenanceRequestNotFoundError: If no record has this id
        """
        record = repository.find_by_id(request_id)
        if record is None:
            raise MaintenanceRequestNotFoundError(request_id)
        return record

    @staticmethod
    def unique_properties(repository: MaintenanceRequestRepository) -> List[str]:
        return repository.unique_properties()

    @staticmethod
    @handle_operation_exceptions(
        "apply_maintenance_command", expected=(MaintenanceRequestNotFoundError,)
    )
    @log_operation("maintenance command", level="info")
    def apply(
        repository: MaintenanceRequestRepository,
        command,
        today: Optional[date] = None,
    ) -> CommandResult:
        """
        Apply one update command.

        Args:
            repository: Request store
            command: CreateRequest, UpdateStatus, AssignTechnician or ScheduleService
            today: Date stamped on lastUpdated/dateSubmitted (defaults to today)

        Returns:
            CommandResult with the stored record and a confirmation message

        Raises:
            MaintenanceRequestNotFoundError: If the command targets an unknown id
            TypeError: If ``command`` is not a maintenance command
        """
        today = today or date.today()

        if isinstance(command, CreateRequest):
            return MaintenanceRequestService._create(repository, command, today)

        if not isinstance(command, (UpdateStatus, AssignTechnician, ScheduleService)):
            raise TypeError(f"Unsupported maintenance command: {type(command).__name__}")

        current = repository.find_by_id(command.request_id)
        if current is None:
            raise MaintenanceRequestNotFoundError(command.request_id)

        if isinstance(command, UpdateStatus):
            updated = current.model_copy(
                update={"status": command.status, "last_updated": today}
            )
            message = f"Status updated to {command.status.value}."
            activity_logger.status_updated(
                current.id, current.status.value, command.status.value, command.notes
            )

        elif isinstance(command, AssignTechnician):
            updated = current.model_copy(
                update={
                    "status": MaintenanceStatus.IN_PROGRESS,
                    "assigned_technician": command.technician_name,
                    "last_updated": today,
                }
            )
            due_text = f" Due: {format_us_date(command.due_date)}" if command.due_date else ""
            message = (
                f"Request assigned to {command.technician_name}"
                f"{_format_cost_range(command.cost_range)}{due_text}."
            )
            activity_logger.technician_assigned(
                current.id,
                command.technician_id,
                command.technician_name,
                command.due_date.isoformat() if command.due_date else None,
            )

        else:
            updated = current.model_copy(
                update={
                    "status": MaintenanceStatus.SCHEDULED,
                    "scheduled_date": command.scheduled_date,
                    "last_updated": today,
                }
            )
            time_text = ""
            if command.scheduled_time:
                time_text = f" at {command.scheduled_time}"
                if command.time_window:
                    time_text += f" ({command.time_window.start} - {command.time_window.end})"
            tz_text = f" [{command.timezone}]" if command.timezone else ""
            message = (
                f"Service scheduled for {format_us_date(command.scheduled_date)}"
                f"{time_text}{tz_text}."
            )
            activity_logger.service_scheduled(
                current.id, command.scheduled_date.isoformat(), command.timezone
            )

        repository.replace(updated)
        return CommandResult(request=updated, message=message)

    @staticmethod
    def _create(
        repository: MaintenanceRequestRepository,
        command: CreateRequest,
        today: date,
    ) -> CommandResult:
        record = MaintenanceRequest(
            id=repository.next_id(),
            title=command.title,
            description=command.description,
            property=command.property or "Unknown Property",
            tenant=command.tenant or "Unknown Tenant",
            category=command.category,
            priority=normalize_submitted_priority(command.priority),
            status=MaintenanceStatus.PENDING,
            date_submitted=today,
            last_updated=today,
            scheduled_date=None,
        )
        repository.add(record)
        activity_logger.request_created(
            record.id, record.title, record.priority.value, record.property
        )
        return CommandResult(
            request=record,
            message=f"{record.title} has been added to your queue.",
        )
