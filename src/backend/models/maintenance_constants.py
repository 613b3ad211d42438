"""
Display labels for maintenance enumerations.

Lookups are total: an unknown value labels as itself.
"""
from typing import Dict, List, Optional

from models.model_enum import (
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
)


STATUS_LABELS: Dict[str, str] = {
    MaintenanceStatus.PENDING.value: "Pending",
    MaintenanceStatus.IN_PROGRESS.value: "In Progress",
    MaintenanceStatus.SCHEDULED.value: "Scheduled",
    MaintenanceStatus.COMPLETED.value: "Completed",
    MaintenanceStatus.CANCELLED.value: "Cancelled",
}

PRIORITY_LABELS: Dict[str, str] = {
    MaintenancePriority.LOW.value: "Low",
    MaintenancePriority.NORMAL.value: "Normal",
    MaintenancePriority.URGENT.value: "High",
    MaintenancePriority.EMERGENCY.value: "Emergency",
}

PRIORITY_DESCRIPTIONS: Dict[str, str] = {
    MaintenancePriority.LOW.value: "Can wait a few days",
    MaintenancePriority.NORMAL.value: "Should be addressed soon",
    MaintenancePriority.URGENT.value: "Urgent, affects daily life",
    MaintenancePriority.EMERGENCY.value: "Immediate attention required",
}

CATEGORY_LABELS: Dict[str, str] = {
    MaintenanceCategory.PLUMBING.value: "Plumbing",
    MaintenanceCategory.ELECTRICAL.value: "Electrical",
    MaintenanceCategory.HVAC.value: "HVAC",
    MaintenanceCategory.APPLIANCES.value: "Appliances",
    MaintenanceCategory.APPLIANCE.value: "Appliance",
    MaintenanceCategory.STRUCTURAL.value: "Structural",
    MaintenanceCategory.FLOORING.value: "Flooring",
    MaintenanceCategory.WINDOWS.value: "Windows/Doors",
    MaintenanceCategory.PEST.value: "Pest Control",
    MaintenanceCategory.OTHER.value: "Other",
}

# Priority values accepted on submission; "medium" is the form's name for normal
SUBMITTED_PRIORITY_MAP: Dict[str, MaintenancePriority] = {
    "low": MaintenancePriority.LOW,
    "normal": MaintenancePriority.NORMAL,
    "medium": MaintenancePriority.NORMAL,
    "urgent": MaintenancePriority.URGENT,
    "emergency": MaintenancePriority.EMERGENCY,
}

# Status tabs in display order
STATUS_TABS: List[str] = [
    "all",
    MaintenanceStatus.PENDING.value,
    MaintenanceStatus.IN_PROGRESS.value,
    MaintenanceStatus.SCHEDULED.value,
    MaintenanceStatus.COMPLETED.value,
]


def _value(item) -> str:
    return item.value if isinstance(item, (MaintenanceStatus, MaintenancePriority, MaintenanceCategory)) else str(item)


def get_status_label(status) -> str:
    """Label for a status; the API spelling ``in_progress`` is accepted too."""
    value = _value(status)
    return STATUS_LABELS.get(value) or STATUS_LABELS.get(value.replace("_", "-"), value)


def get_priority_label(priority) -> str:
    value = _value(priority)
    return PRIORITY_LABELS.get(value, value)


def get_category_label(category) -> str:
    value = _value(category)
    return CATEGORY_LABELS.get(value, value)


def normalize_submitted_priority(priority: Optional[str]) -> MaintenancePriority:
    """Map a submitted priority to the enumeration, defaulting to normal."""
    if not priority:
        return MaintenancePriority.NORMAL
    return SUBMITTED_PRIORITY_MAP.get(priority.lower(), MaintenancePriority.NORMAL)
