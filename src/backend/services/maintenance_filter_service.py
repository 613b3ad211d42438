"""
Filter pipeline for the maintenance request list.

filter_requests() applies every active predicate of a FilterCriteria as an
AND-chain and returns the surviving records in their original order. It
never mutates or reorders its input.
"""
import logging
from datetime import date
from typing import Callable, FrozenSet, List, Optional, Sequence

from models.filter_criteria import FilterCriteria
from models.maintenance_request import MaintenanceRequest
from models.model_enum import MaintenanceStatus

logger = logging.getLogger(__name__)

Predicate = Callable[[MaintenanceRequest], bool]


def format_submitted_date(value: date) -> str:
    """Format a date the way the list displays it, e.g. "Apr 25, 2023"."""
    return f"{value:%b} {value.day}, {value.year}"


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def matches_search(record: MaintenanceRequest, term: str) -> bool:
    """True if ``term`` occurs in the title, property, tenant or description."""
    return (
        _contains(record.title, term)
        or _contains(record.property, term)
        or _contains(record.tenant, term)
        or _contains(record.description, term)
    )


def resolve_status_filter(criteria: FilterCriteria) -> Optional[FrozenSet[MaintenanceStatus]]:
    """
    Reconcile the status tab with the column status selection.

    Returns the set of statuses a record must have, or None for no status
    constraint.

    - "all" tab: the column selection applies as-is.
    - Specific tab: the tab status is required. The column selection only
      narrows further when it includes the tab status; a column selection
      that excludes the tab status is ignored (the tab wins).
    """
    column = frozenset(criteria.statuses)
    tab_status = criteria.tab_status

    if tab_status is None:
        return column or None

    if tab_status in column:
        return column & {tab_status}

    # Column selection contradicts the tab: ignore it
    return frozenset({tab_status})


def build_predicates(criteria: FilterCriteria) -> List[Predicate]:
    """Build the ordered list of active predicates for ``criteria``."""
    predicates: List[Predicate] = []

    if criteria.search_term:
        term = criteria.search_term
        predicates.append(lambda r: matches_search(r, term))

    if criteria.properties:
        properties = frozenset(criteria.properties)
        predicates.append(lambda r: r.property in properties)

    if criteria.category is not None:
        category = criteria.category
        predicates.append(lambda r: r.category == category)

    if criteria.tenant_query:
        tenant = criteria.tenant_query
        predicates.append(lambda r: _contains(r.tenant, tenant))

    if criteria.issue_query:
        issue = criteria.issue_query
        predicates.append(lambda r: _contains(r.title, issue))

    if criteria.priorities:
        priorities = frozenset(criteria.priorities)
        predicates.append(lambda r: r.priority in priorities)

    statuses = resolve_status_filter(criteria)
    if statuses is not None:
        predicates.append(lambda r: r.status in statuses)

    if criteria.date_query:
        date_query = criteria.date_query
        predicates.append(
            lambda r: _contains(format_submitted_date(r.date_submitted), date_query)
        )

    return predicates


def filter_requests(
    records: Sequence[MaintenanceRequest],
    criteria: FilterCriteria,
) -> List[MaintenanceRequest]:
    """
    Return the records that pass every active filter, in input order.

    Args:
        records: Full record list
        criteria: Filter state of the list view

    Returns:
        New list holding the matching records
    """
    predicates = build_predicates(criteria)
    if not predicates:
        return list(records)

    filtered = [r for r in records if all(p(r) for p in predicates)]
    logger.debug(
        f"Filtered maintenance requests | Predicates: {len(predicates)} | "
        f"Matched: {len(filtered)}/{len(records)}"
    )
    return filtered
