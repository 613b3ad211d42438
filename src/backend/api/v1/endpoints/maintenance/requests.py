"""
Maintenance request API endpoints.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import ValidationError

from api.schemas.maintenance_request import (
    AssignTechnicianRequest,
    FilterOption,
    MaintenanceCommandResponse,
    MaintenanceFilterOptions,
    MaintenanceRequestCreate,
    MaintenanceRequestPage,
    ScheduleServiceRequest,
    StatusUpdateRequest,
)
from core.config import Settings
from core.dependencies import get_app_settings, get_request_repository
from models.filter_criteria import FilterCriteria
from models.maintenance_commands import (
    AssignTechnician,
    CreateRequest,
    ScheduleService,
    UpdateStatus,
)
from models.maintenance_constants import (
    CATEGORY_LABELS,
    PRIORITY_DESCRIPTIONS,
    PRIORITY_LABELS,
    STATUS_LABELS,
    STATUS_TABS,
)
from models.maintenance_request import MaintenanceRequest
from models.model_enum import MaintenancePriority, MaintenanceStatus, StatusTab
from repositories.maintenance_request_repository import MaintenanceRequestRepository
from services.maintenance_request_service import (
    MaintenanceRequestNotFoundError,
    MaintenanceRequestService,
)
from services.maintenance_view_service import MaintenanceViewState

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=MaintenanceRequestPage)
async def list_maintenance_requests(
    response: Response,
    search: str = Query("", description="Matches title, property, tenant or description"),
    properties: List[str] = Query([], alias="property"),
    category: str = Query("all"),
    tenant: str = Query(""),
    issue: str = Query(""),
    date: str = Query("", description="Matches the submitted date as shown, e.g. 'Apr 25'"),
    priorities: List[MaintenancePriority] = Query([], alias="priority"),
    statuses: List[MaintenanceStatus] = Query([], alias="status"),
    tab: StatusTab = Query(StatusTab.ALL),
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, alias="perPage", ge=1),
    repository: MaintenanceRequestRepository = Depends(get_request_repository),
    app_settings: Settings = Depends(get_app_settings),
):
    """
    List maintenance requests with filters and pagination.

    - **tab**: primary status filter ("all" for none)
    - **status**: column status filter; ignored when it excludes the tab status
    - **page**: 1-indexed; a page past the end is served as the last page
    """
    per_page = per_page or app_settings.pagination.default_page_size
    if per_page > app_settings.pagination.max_page_size:
        raise HTTPException(
            status_code=422,
            detail=f"perPage must be at most {app_settings.pagination.max_page_size}",
        )

    try:
        criteria = FilterCriteria(
            search_term=search,
            properties=properties,
            category=category,
            tenant_query=tenant,
            issue_query=issue,
            date_query=date,
            priorities=priorities,
            statuses=statuses,
            active_tab=tab,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    state = MaintenanceViewState(
        criteria=criteria, current_page=page, items_per_page=per_page
    )
    view = MaintenanceRequestService.list_view(repository, state)

    response.headers["X-Total-Count"] = str(view.page.total)
    response.headers["X-Page"] = str(view.page.page)
    response.headers["X-Per-Page"] = str(view.page.per_page)

    return MaintenanceRequestPage(
        items=view.page.items,
        total=view.page.total,
        total_unfiltered=view.total_unfiltered,
        page=view.page.page,
        per_page=view.page.per_page,
        total_pages=view.page.total_pages,
        start_item=view.page.start_item,
        end_item=view.page.end_item,
        active_tab=criteria.active_tab,
        active_filters=view.active_filters,
        has_active_filters=view.has_active_filters,
    )


@router.get("/filter-options", response_model=MaintenanceFilterOptions)
async def get_filter_options(
    repository: MaintenanceRequestRepository = Depends(get_request_repository),
):
    """Values for the property, status, priority and category filters."""
    return MaintenanceFilterOptions(
        properties=MaintenanceRequestService.unique_properties(repository),
        tabs=[
            FilterOption(value=tab, label="All Requests" if tab == "all" else STATUS_LABELS[tab])
            for tab in STATUS_TABS
        ],
        statuses=[FilterOption(value=v, label=l) for v, l in STATUS_LABELS.items()],
        priorities=[
            FilterOption(value=v, label=l, description=PRIORITY_DESCRIPTIONS.get(v))
            for v, l in PRIORITY_LABELS.items()
        ],
        categories=[FilterOption(value=v, label=l) for v, l in CATEGORY_LABELS.items()],
    )


@router.get("/{request_id}", response_model=MaintenanceRequest)
async def get_maintenance_request(
    request_id: str,
    repository: MaintenanceRequestRepository = Depends(get_request_repository),
):
    """Get a maintenance request by ID."""
    try:
        return MaintenanceRequestService.get_request(repository, request_id)
    except MaintenanceRequestNotFoundError:
        raise HTTPException(status_code=404, detail="Maintenance request not found")


@router.post("", response_model=MaintenanceCommandResponse, status_code=201)
async def create_maintenance_request(
    request_data: MaintenanceRequestCreate,
    repository: MaintenanceRequestRepository = Depends(get_request_repository),
):
    """
    Submit a new maintenance request.

    - **title**: required; trimmed
    - **priority**: "medium" is accepted as normal; unknown values become normal
    - **property** / **tenant**: default to "Unknown Property" / "Unknown Tenant"
    """
    try:
        command = CreateRequest(**request_data.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    result = MaintenanceRequestService.apply(repository, command)
    return MaintenanceCommandResponse(request=result.request, message=result.message)


@router.patch("/{request_id}/status", response_model=MaintenanceCommandResponse)
async def update_maintenance_status(
    request_id: str,
    update_data: StatusUpdateRequest,
    repository: MaintenanceRequestRepository = Depends(get_request_repository),
):
    """Update the status of a maintenance request."""
    command = UpdateStatus(request_id=request_id, **update_data.model_dump())
    return _apply(repository, command)


@router.post("/{request_id}/assign", response_model=MaintenanceCommandResponse)
async def assign_technician(
    request_id: str,
    assign_data: AssignTechnicianRequest,
    repository: MaintenanceRequestRepository = Depends(get_request_repository),
):
    """Assign a technician; the request moves to in-progress."""
    command = AssignTechnician(request_id=request_id, **assign_data.model_dump())
    return _apply(repository, command)


@router.post("/{request_id}/schedule", response_model=MaintenanceCommandResponse)
async def schedule_service(
    request_id: str,
    schedule_data: ScheduleServiceRequest,
    repository: MaintenanceRequestRepository = Depends(get_request_repository),
):
    """Schedule a service visit; the request moves to scheduled."""
    command = ScheduleService(request_id=request_id, **schedule_data.model_dump())
    return _apply(repository, command)


def _apply(repository: MaintenanceRequestRepository, command) -> MaintenanceCommandResponse:
    try:
        result = MaintenanceRequestService.apply(repository, command)
    except MaintenanceRequestNotFoundError:
        raise HTTPException(status_code=404, detail="Maintenance request not found")
    return MaintenanceCommandResponse(request=result.request, message=result.message)
