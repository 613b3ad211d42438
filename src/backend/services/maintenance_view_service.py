"""
View state of the owner maintenance list.

MaintenanceViewState bundles the filter criteria with the current page.
Every transition returns a new state, and every transition that touches a
filter or the status tab puts the list back on page 1, so a shrunk result
set is never shown through a stale page number.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from pydantic import Field

from core.pagination import Page, clamp_page, paginate, total_pages
from core.schema_base import FrozenSchemaModel
from models.filter_criteria import ActiveFilter, FilterCriteria
from models.maintenance_request import MaintenanceRequest
from models.model_enum import FilterType, StatusTab
from services.active_filter_service import has_active_filters, summarize_active_filters
from services.maintenance_filter_service import filter_requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaintenanceView:
    """Rendered list: the visible page plus everything needed to draw its chrome."""

    criteria: FilterCriteria
    page: Page[MaintenanceRequest]
    active_filters: List[ActiveFilter]
    has_active_filters: bool
    total_unfiltered: int


class MaintenanceViewState(FrozenSchemaModel):
    """Filter criteria, status tab and current page of the list view."""

    criteria: FilterCriteria = FilterCriteria()
    current_page: int = Field(1, ge=1)
    items_per_page: int = Field(5, ge=1)

    def with_criteria(self, **changes) -> "MaintenanceViewState":
        """
        Replace filter fields and return to page 1.

        Raises:
            TypeError: If a keyword is not a FilterCriteria field
        """
        unknown = set(changes) - set(FilterCriteria.model_fields)
        if unknown:
            raise TypeError(f"Unknown filter fields: {', '.join(sorted(unknown))}")

        criteria = FilterCriteria.model_validate(
            {**self.criteria.model_dump(), **changes}
        )
        return self.model_copy(update={"criteria": criteria, "current_page": 1})

    def select_tab(self, tab) -> "MaintenanceViewState":
        """
        Switch status tab and return to page 1.

        A column status selection that does not include the new tab's status
        is cleared, since the tab would override it anyway.
        """
        tab = StatusTab(tab)
        statuses = self.criteria.statuses
        if tab != StatusTab.ALL and statuses and tab.value not in statuses:
            statuses = ()

        criteria = self.criteria.model_copy(
            update={"active_tab": tab, "statuses": statuses}
        )
        return self.model_copy(update={"criteria": criteria, "current_page": 1})

    def remove_filter(self, filter_type, value: Optional[str] = None) -> "MaintenanceViewState":
        """
        Remove one chip, or every value of a multi-select when ``value`` is None.
        """
        filter_type = FilterType(filter_type)
        c = self.criteria

        if filter_type == FilterType.SEARCH:
            return self.with_criteria(search_term="")
        if filter_type == FilterType.TENANT:
            return self.with_criteria(tenant_query="")
        if filter_type == FilterType.ISSUE:
            return self.with_criteria(issue_query="")
        if filter_type == FilterType.DATE:
            return self.with_criteria(date_query="")
        if filter_type == FilterType.CATEGORY:
            return self.with_criteria(category=None)
        if filter_type == FilterType.PROPERTY:
            kept = () if value is None else tuple(p for p in c.properties if p != value)
            return self.with_criteria(properties=kept)
        if filter_type == FilterType.PRIORITY:
            kept = () if value is None else tuple(p for p in c.priorities if p != value)
            return self.with_criteria(priorities=kept)

        kept = () if value is None else tuple(s for s in c.statuses if s != value)
        return self.with_criteria(statuses=kept)

    def clear_all_filters(self) -> "MaintenanceViewState":
        """Drop every filter including the search term; the tab is kept."""
        criteria = FilterCriteria(active_tab=self.criteria.active_tab)
        return self.model_copy(update={"criteria": criteria, "current_page": 1})

    def go_to_page(self, page: int, pages: int) -> "MaintenanceViewState":
        return self.model_copy(update={"current_page": clamp_page(page, pages)})

    def next_page(self, pages: int) -> "MaintenanceViewState":
        return self.go_to_page(self.current_page + 1, pages)

    def previous_page(self) -> "MaintenanceViewState":
        return self.model_copy(update={"current_page": max(1, self.current_page - 1)})

    def render(self, records: Sequence[MaintenanceRequest]) -> MaintenanceView:
        """Filter, paginate and summarize ``records`` for display."""
        filtered = filter_requests(records, self.criteria)
        pages = total_pages(len(filtered), self.items_per_page)

        page_number = clamp_page(self.current_page, pages)
        if page_number != self.current_page:
            logger.warning(
                f"Page {self.current_page} is past the end of {pages} page(s); "
                f"showing page {page_number}"
            )

        return MaintenanceView(
            criteria=self.criteria,
            page=paginate(filtered, page_number, self.items_per_page),
            active_filters=summarize_active_filters(self.criteria),
            has_active_filters=has_active_filters(self.criteria),
            total_unfiltered=len(records),
        )
