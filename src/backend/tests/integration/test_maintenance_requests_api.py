"""
Integration tests for the maintenance request API endpoints.

Tests:
- List with filters, status tab and pagination
- Filter options
- Get request details
- Create request
- Status update, technician assignment and scheduling
- Validation and not-found errors
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from app.factory import create_app
from core.config import APISettings, PaginationSettings, RateLimitSettings, Settings

API = "/api/v1/maintenance/requests"


def _ids(payload):
    return [item["id"] for item in payload["items"]]


# ============================================================================
# Listing
# ============================================================================

class TestListRequests:

    @pytest.mark.asyncio
    async def test_default_page(self, client):
        response = await client.get(API)

        assert response.status_code == 200
        data = response.json()
        assert _ids(data) == ["M-1001", "M-1002", "M-1003", "M-1004", "M-1005"]
        assert data["total"] == 10
        assert data["totalPages"] == 2
        assert data["startItem"] == 1
        assert data["endItem"] == 5
        assert data["activeTab"] == "all"
        assert data["hasActiveFilters"] is False
        assert response.headers["X-Total-Count"] == "10"
        assert response.headers["X-Per-Page"] == "5"

    @pytest.mark.asyncio
    async def test_records_use_camel_case(self, client):
        response = await client.get(API, params={"search": "heater"})

        item = response.json()["items"][0]
        assert item["id"] == "M-1010"
        assert item["dateSubmitted"] == "2023-04-20"
        assert item["scheduledDate"] == "2023-04-21"

    @pytest.mark.asyncio
    async def test_pending_tab_ignores_contradicting_column(self, client):
        response = await client.get(API, params={"tab": "pending", "status": "completed"})

        data = response.json()
        assert _ids(data) == ["M-1001", "M-1005", "M-1009"]
        assert [c["label"] for c in data["activeFilters"]] == ["Completed"]

    @pytest.mark.asyncio
    async def test_repeated_query_parameters(self, client):
        response = await client.get(
            API,
            params=[("priority", "urgent"), ("priority", "low"), ("category", "hvac")],
        )

        assert _ids(response.json()) == ["M-1002", "M-1007", "M-1010"]

    @pytest.mark.asyncio
    async def test_second_page(self, client):
        response = await client.get(API, params={"page": 2})

        data = response.json()
        assert _ids(data) == ["M-1006", "M-1007", "M-1008", "M-1009", "M-1010"]
        assert data["startItem"] == 6
        assert data["endItem"] == 10

    @pytest.mark.asyncio
    async def test_page_past_end_serves_last_page(self, client):
        response = await client.get(API, params={"page": 7, "perPage": 4})

        data = response.json()
        assert data["page"] == 3
        assert _ids(data) == ["M-1009", "M-1010"]
        assert response.headers["X-Page"] == "3"

    @pytest.mark.asyncio
    async def test_no_matches(self, client):
        response = await client.get(API, params={"search": "elevator"})

        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0
        assert data["totalUnfiltered"] == 10
        assert data["page"] == 1

    @pytest.mark.asyncio
    async def test_per_page_above_maximum(self, client):
        response = await client.get(API, params={"perPage": 500})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_category(self, client):
        response = await client.get(API, params={"category": "garden"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_tab(self, client):
        response = await client.get(API, params={"tab": "archived"})
        assert response.status_code == 422


class TestFilterOptions:

    @pytest.mark.asyncio
    async def test_options(self, client):
        response = await client.get(f"{API}/filter-options")

        assert response.status_code == 200
        data = response.json()
        assert data["properties"][0] == "123 Main St, Apt 4B"
        assert len(data["properties"]) == 9
        assert data["tabs"][0] == {"value": "all", "label": "All Requests", "description": None}
        assert {"value": "urgent", "label": "High", "description": "Urgent, affects daily life"} in data["priorities"]


# ============================================================================
# Details and commands
# ============================================================================

class TestGetRequest:

    @pytest.mark.asyncio
    async def test_get_by_id(self, client):
        response = await client.get(f"{API}/M-1003")

        assert response.status_code == 200
        assert response.json()["title"] == "Broken window in living room"

    @pytest.mark.asyncio
    async def test_unknown_id(self, client):
        response = await client.get(f"{API}/M-4040")
        assert response.status_code == 404


class TestCommands:

    @pytest.mark.asyncio
    async def test_create_request(self, client, repository):
        response = await client.post(
            API,
            json={
                "title": "Garage door stuck",
                "description": "Opener hums but the door does not move",
                "category": "other",
                "priority": "medium",
                "property": "890 Elm St, Unit 5",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["request"]["id"] == "M-1011"
        assert data["request"]["priority"] == "normal"
        assert data["request"]["status"] == "pending"
        assert data["request"]["tenant"] == "Unknown Tenant"
        assert data["message"] == "Garage door stuck has been added to your queue."
        assert repository.list_all()[0].id == "M-1011"

    @pytest.mark.asyncio
    async def test_create_blank_title(self, client):
        response = await client.post(API, json={"title": "   "})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_status(self, client):
        response = await client.patch(f"{API}/M-1001/status", json={"status": "completed"})

        assert response.status_code == 200
        assert response.json()["request"]["status"] == "completed"
        assert response.json()["message"] == "Status updated to completed."

        listing = await client.get(API, params={"tab": "pending"})
        assert _ids(listing.json()) == ["M-1005", "M-1009"]

    @pytest.mark.asyncio
    async def test_assign_technician(self, client):
        response = await client.post(
            f"{API}/M-1005/assign",
            json={
                "technicianId": "tech-3",
                "technicianName": "Dana Cruz",
                "dueDate": "2023-05-20",
                "costRange": {"min": 100, "max": 250},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["request"]["status"] == "in-progress"
        assert data["request"]["assignedTechnician"] == "Dana Cruz"
        assert data["message"] == "Request assigned to Dana Cruz ($100 - $250) Due: 5/20/2023."

    @pytest.mark.asyncio
    async def test_schedule_service(self, client):
        response = await client.post(
            f"{API}/M-1009/schedule",
            json={"scheduledDate": "2023-05-22", "scheduledTime": "2:00 PM"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["request"]["status"] == "scheduled"
        assert data["request"]["scheduledDate"] == "2023-05-22"
        assert data["message"] == "Service scheduled for 5/22/2023 at 2:00 PM."

    @pytest.mark.asyncio
    async def test_command_on_unknown_id(self, client):
        response = await client.patch(f"{API}/M-4040/status", json={"status": "completed"})
        assert response.status_code == 404


class TestServiceRoutes:

    @pytest.mark.asyncio
    async def test_health_reports_store_size(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["services"]["request_store"] == {
            "status": "healthy",
            "records": 10,
        }

    @pytest.mark.asyncio
    async def test_correlation_id_is_echoed(self, client):
        response = await client.get("/", headers={"X-Correlation-ID": "abc-123"})
        assert response.headers["X-Correlation-ID"] == "abc-123"


# ============================================================================
# App settings
# ============================================================================

class TestAppSettings:

    @pytest.mark.asyncio
    async def test_app_uses_its_own_page_size(self):
        app = create_app(
            Settings(
                api=APISettings(app_name="Desk Under Test"),
                pagination=PaginationSettings(default_page_size=3, max_page_size=4),
                rate_limit=RateLimitSettings(enabled=False),
            )
        )

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            listing = await ac.get(API)
            too_large = await ac.get(API, params={"perPage": 5})
            root = await ac.get("/")

        assert listing.json()["perPage"] == 3
        assert _ids(listing.json()) == ["M-1001", "M-1002", "M-1003"]
        assert listing.json()["totalPages"] == 4
        assert too_large.status_code == 422
        assert root.json()["name"] == "Desk Under Test"

    @pytest.mark.asyncio
    async def test_activity_log_carries_correlation_id(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="maintenance"):
            response = await client.patch(
                f"{API}/M-1001/status",
                json={"status": "scheduled"},
                headers={"X-Correlation-ID": "trace-7"},
            )

        assert response.status_code == 200
        messages = [r.getMessage() for r in caplog.records if r.name == "maintenance.requests"]
        assert messages == [
            "Status updated | ID: M-1001 | pending -> scheduled | Correlation: trace-7"
        ]
