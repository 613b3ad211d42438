"""
Unit tests for the maintenance request filter pipeline.

Tests cover:
- Each predicate on its own
- No-op inputs (empty strings, empty selections, "all")
- Status tab / column selection reconciliation
- Order preservation and input immutability
"""

from datetime import date

import pytest

from models.filter_criteria import FilterCriteria
from models.model_enum import MaintenancePriority, MaintenanceStatus, StatusTab
from services.maintenance_filter_service import (
    filter_requests,
    format_submitted_date,
    matches_search,
    resolve_status_filter,
)
from tests.factories import MaintenanceRequestFactory


def _ids(records):
    return [r.id for r in records]


class TestFormatSubmittedDate:
    """Tests for the displayed date format."""

    def test_short_month_day_year(self):
        assert format_submitted_date(date(2023, 4, 25)) == "Apr 25, 2023"

    def test_day_is_not_zero_padded(self):
        assert format_submitted_date(date(2023, 5, 1)) == "May 1, 2023"


class TestSearch:
    """Tests for the free-text search predicate."""

    def test_search_matches_title_case_insensitively(self, demo_records):
        result = filter_requests(demo_records, FilterCriteria(search_term="FAUCET"))
        assert _ids(result) == ["M-1001", "M-1006"]

    def test_search_matches_property(self, demo_records):
        result = filter_requests(demo_records, FilterCriteria(search_term="oak"))
        assert _ids(result) == ["M-1003", "M-1005", "M-1007"]

    def test_search_matches_description(self):
        record = MaintenanceRequestFactory.create(
            title="Noise", description="Pipes rattle at night"
        )
        assert matches_search(record, "rattle")
        assert not matches_search(record, "squeak")

    def test_empty_search_is_noop(self, demo_records):
        result = filter_requests(demo_records, FilterCriteria(search_term=""))
        assert result == demo_records


class TestFieldFilters:
    """Tests for the property, category, text and priority predicates."""

    def test_property_selection(self, demo_records):
        criteria = FilterCriteria(properties=["123 Main St, Apt 4B"])
        assert _ids(filter_requests(demo_records, criteria)) == ["M-1001", "M-1006"]

    def test_category(self, demo_records):
        criteria = FilterCriteria(category="hvac")
        assert _ids(filter_requests(demo_records, criteria)) == ["M-1002", "M-1007", "M-1010"]

    @pytest.mark.parametrize("category", ["all", "", None])
    def test_all_category_is_noop(self, demo_records, category):
        criteria = FilterCriteria(category=category)
        assert criteria.category is None
        assert filter_requests(demo_records, criteria) == demo_records

    def test_tenant_substring(self, demo_records):
        criteria = FilterCriteria(tenant_query="smith")
        assert _ids(filter_requests(demo_records, criteria)) == ["M-1001", "M-1006"]

    def test_issue_matches_title_only(self, demo_records):
        criteria = FilterCriteria(issue_query="dishwasher")
        assert _ids(filter_requests(demo_records, criteria)) == ["M-1004", "M-1009"]

    def test_date_matches_formatted_submission_date(self, demo_records):
        criteria = FilterCriteria(date_query="apr 25")
        assert _ids(filter_requests(demo_records, criteria)) == ["M-1001"]

    def test_priority_selection(self, demo_records):
        criteria = FilterCriteria(priorities=["urgent"])
        assert _ids(filter_requests(demo_records, criteria)) == [
            "M-1002", "M-1005", "M-1007", "M-1010",
        ]

    def test_filters_combine_with_and(self, demo_records):
        criteria = FilterCriteria(category="hvac", priorities=["urgent"], date_query="May")
        assert _ids(filter_requests(demo_records, criteria)) == ["M-1007"]


class TestStatusResolution:
    """Tests for reconciling the status tab with the column selection."""

    def test_all_tab_uses_column_selection(self, demo_records):
        criteria = FilterCriteria(statuses=["completed", "scheduled"])
        assert _ids(filter_requests(demo_records, criteria)) == [
            "M-1003", "M-1004", "M-1007", "M-1008", "M-1010",
        ]

    def test_all_tab_without_column_selection_is_noop(self):
        assert resolve_status_filter(FilterCriteria()) is None

    def test_tab_alone(self, demo_records):
        criteria = FilterCriteria(active_tab=StatusTab.PENDING)
        assert _ids(filter_requests(demo_records, criteria)) == ["M-1001", "M-1005", "M-1009"]

    def test_column_excluding_tab_is_ignored(self, demo_records):
        with_column = FilterCriteria(active_tab="pending", statuses=["completed"])
        without_column = FilterCriteria(active_tab="pending")

        assert resolve_status_filter(with_column) == {MaintenanceStatus.PENDING}
        assert filter_requests(demo_records, with_column) == filter_requests(
            demo_records, without_column
        )

    def test_column_including_tab_narrows_to_tab(self):
        criteria = FilterCriteria(active_tab="pending", statuses=["pending", "completed"])
        assert resolve_status_filter(criteria) == {MaintenanceStatus.PENDING}


class TestFilterRequests:
    """End-to-end behavior of filter_requests()."""

    def test_result_is_ordered_subset(self, demo_records):
        result = filter_requests(demo_records, FilterCriteria(priorities=["normal"]))
        positions = [demo_records.index(r) for r in result]
        assert positions == sorted(positions)
        assert all(r in demo_records for r in result)

    def test_input_is_not_mutated(self, demo_records):
        before = list(demo_records)
        filter_requests(demo_records, FilterCriteria(search_term="heater"))
        assert demo_records == before

    def test_no_filters_returns_new_list(self, demo_records):
        result = filter_requests(demo_records, FilterCriteria())
        assert result == demo_records
        assert result is not demo_records

    def test_pending_tab_with_one_emergency(self, demo_records):
        """Ten records, three pending, one of those an emergency."""
        records = [
            r.model_copy(update={"priority": MaintenancePriority.EMERGENCY})
            if r.id == "M-1005" else r
            for r in demo_records
        ]

        pending = filter_requests(records, FilterCriteria(active_tab="pending"))
        assert len(records) == 10
        assert len(pending) == 3

        emergencies = filter_requests(
            records, FilterCriteria(active_tab="pending", priorities=["emergency"])
        )
        assert _ids(emergencies) == ["M-1005"]
