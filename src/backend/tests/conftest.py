"""
Pytest configuration and fixtures for testing.

Provides:
- Demo request records and a fresh in-memory repository per test
- An app instance with its own store, and an httpx client bound to it

Usage:
    pytest src/backend/tests -v
"""

from typing import AsyncGenerator, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.factory import create_app
from core.config import RateLimitSettings, Settings
from db.seed_data import demo_requests
from models.maintenance_request import MaintenanceRequest
from repositories.maintenance_request_repository import MaintenanceRequestRepository


# ============================================================================
# Record Fixtures
# ============================================================================

@pytest.fixture
def demo_records() -> List[MaintenanceRequest]:
    """The ten demo maintenance requests."""
    return demo_requests()


@pytest.fixture
def repository(demo_records) -> MaintenanceRequestRepository:
    """Repository seeded with the demo requests."""
    return MaintenanceRequestRepository(demo_records)


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings with rate limiting off so tests never hit 429."""
    return Settings(rate_limit=RateLimitSettings(enabled=False))


@pytest.fixture
def app(test_settings, repository):
    """FastAPI app whose request store is the ``repository`` fixture."""
    application = create_app(test_settings)
    application.state.maintenance_repository = repository
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
