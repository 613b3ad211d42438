"""
Active-filter summary for the maintenance request list.

Projects a FilterCriteria into removable chips, grouped by filter type in
display order: search, tenant, issue, properties, priorities, statuses,
date, category.
"""
from typing import List

from models.filter_criteria import ActiveFilter, FilterCriteria
from models.maintenance_constants import (
    get_category_label,
    get_priority_label,
    get_status_label,
)
from models.model_enum import FilterType


def summarize_active_filters(criteria: FilterCriteria) -> List[ActiveFilter]:
    """Build one chip per active filter value."""
    active: List[ActiveFilter] = []

    if criteria.search_term:
        active.append(
            ActiveFilter(type=FilterType.SEARCH, label=f"Search: {criteria.search_term}")
        )

    if criteria.tenant_query:
        active.append(
            ActiveFilter(type=FilterType.TENANT, label=f"Tenant: {criteria.tenant_query}")
        )

    if criteria.issue_query:
        active.append(
            ActiveFilter(type=FilterType.ISSUE, label=f"Issue: {criteria.issue_query}")
        )

    for prop in criteria.properties:
        active.append(ActiveFilter(type=FilterType.PROPERTY, label=prop, value=prop))

    for priority in criteria.priorities:
        active.append(
            ActiveFilter(
                type=FilterType.PRIORITY,
                label=get_priority_label(priority),
                value=priority.value,
            )
        )

    for status in criteria.statuses:
        active.append(
            ActiveFilter(
                type=FilterType.STATUS,
                label=get_status_label(status),
                value=status.value,
            )
        )

    if criteria.date_query:
        active.append(
            ActiveFilter(type=FilterType.DATE, label=f"Date: {criteria.date_query}")
        )

    if criteria.category is not None:
        active.append(
            ActiveFilter(
                type=FilterType.CATEGORY,
                label=f"Category: {get_category_label(criteria.category)}",
            )
        )

    return active


def has_active_filters(criteria: FilterCriteria) -> bool:
    """True when any filter other than the status tab is set."""
    return bool(
        criteria.search_term
        or criteria.tenant_query
        or criteria.issue_query
        or criteria.date_query
        or criteria.properties
        or criteria.priorities
        or criteria.statuses
        or criteria.category is not None
    )
