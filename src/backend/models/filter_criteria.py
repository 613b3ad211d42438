"""
Filter criteria value objects for the maintenance request list.

All filter inputs of the list view live in one immutable FilterCriteria so
the filter pipeline is a pure function of (records, criteria).
"""
from typing import Optional, Tuple

from pydantic import field_validator

from core.schema_base import FrozenSchemaModel
from models.model_enum import (
    ALL,
    FilterType,
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
    StatusTab,
)


def _dedupe(values) -> tuple:
    """Drop repeated entries, keeping first-selection order."""
    seen = []
    for value in values or ():
        if value not in seen:
            seen.append(value)
    return tuple(seen)


class FilterCriteria(FrozenSchemaModel):
    """
    Every filter of the maintenance list.

    - Empty strings and empty selections mean "no filter".
    - ``category`` of None means all categories; "all" and "" are accepted on input.
    - ``statuses`` is the column multi-select; ``active_tab`` is the status tab.
    """

    search_term: str = ""
    properties: Tuple[str, ...] = ()
    category: Optional[MaintenanceCategory] = None
    tenant_query: str = ""
    issue_query: str = ""
    date_query: str = ""
    priorities: Tuple[MaintenancePriority, ...] = ()
    statuses: Tuple[MaintenanceStatus, ...] = ()
    active_tab: StatusTab = StatusTab.ALL

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, v):
        """Treat "all" and "" as no category filter."""
        if v is None or v == "" or v == ALL:
            return None
        return v

    @field_validator("properties", "priorities", "statuses", mode="before")
    @classmethod
    def dedupe_selection(cls, v):
        if v is None:
            return ()
        if isinstance(v, (str, bytes)):
            return (v,)
        return _dedupe(v)

    @property
    def tab_status(self) -> Optional[MaintenanceStatus]:
        """Status selected by the tab, or None for the "all" tab."""
        if self.active_tab == StatusTab.ALL:
            return None
        return MaintenanceStatus(self.active_tab.value)


class ActiveFilter(FrozenSchemaModel):
    """One removable chip of the active-filter summary."""

    type: FilterType
    label: str
    value: Optional[str] = None
