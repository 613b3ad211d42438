"""
Model enums for maintenance requests.

These enums cover the closed value sets a maintenance request draws from.
They double as filter values, so every member's value is the exact string
the portal sends and displays.
"""
from enum import Enum


ALL = "all"


class MaintenanceStatus(str, Enum):
    """
    Lifecycle status of a maintenance request.

    Cancellation is a status, not a removal.
    """
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class StatusTab(str, Enum):
    """
    Top-level status tab of the request list.

    Every status plus "all"; the tab is the primary status constraint.
    """
    ALL = ALL
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class MaintenancePriority(str, Enum):
    """Urgency of a maintenance request."""
    LOW = "low"
    NORMAL = "normal"
    URGENT = "urgent"
    EMERGENCY = "emergency"


class MaintenanceCategory(str, Enum):
    """Trade category of a maintenance request."""
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    HVAC = "hvac"
    APPLIANCES = "appliances"
    APPLIANCE = "appliance"
    STRUCTURAL = "structural"
    FLOORING = "flooring"
    WINDOWS = "windows"
    PEST = "pest"
    OTHER = "other"


class FilterType(str, Enum):
    """
    Kind of an active-filter chip.

    Used by ActiveFilter.type and by MaintenanceViewState.remove_filter.
    """
    SEARCH = "search"
    TENANT = "tenant"
    ISSUE = "issue"
    PROPERTY = "property"
    PRIORITY = "priority"
    STATUS = "status"
    DATE = "date"
    CATEGORY = "category"
