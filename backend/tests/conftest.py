"""
Pytest configuration and shared fixtures for QuietRoute backend tests.

Provides:
- async_client / test_client: HTTP clients for API integration tests
- no_redis: keeps tests off any real Redis server
- Reusable domain fixtures (preferences, segments, candidate routes)
"""
import pytest
import pytest_asyncio
from datetime import datetime
from httpx import AsyncClient, ASGITransport
from typing import AsyncGenerator

from quietroute.main import app
from quietroute.services.preferences import Preferences
from quietroute.services.road_attributes import LitStatus, RoadClass, RoadSegment
from quietroute.services.route_scoring import CandidateRoute, RouteStep
from quietroute.utils import cache as cache_utils


@pytest.fixture(autouse=True)
def no_redis(monkeypatch):
    """
    Disable Redis for every test.

    Tests that exercise the cache install their own fake client on top of this.
    """
    monkeypatch.setattr(cache_utils, "get_redis_client", lambda: None)


@pytest_asyncio.fixture(scope="function")
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client for testing FastAPI endpoints.

    Usage:
        async def test_example(async_client):
            response = await async_client.get("/api/v1/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(scope="function")
def test_client():
    """
    Synchronous HTTP client for testing FastAPI endpoints.

    Scope: function - Each test gets a fresh client.

    Usage:
        def test_example(test_client):
            response = test_client.post("/api/v1/routes/score", json={...})
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    with TestClient(app) as client:
        yield client


@pytest.fixture(scope="session")
def anyio_backend():
    """Configure anyio backend for pytest-asyncio."""
    return "asyncio"


# ============================================================================
# Domain fixtures
# ============================================================================


@pytest.fixture
def neutral_preferences():
    """Preferences that disable both comfort dimensions."""
    return Preferences(quietness=0.0, brightness=0.0)


@pytest.fixture
def noon_sunday():
    """Sunday 12:00: daytime, no school, no nightlife, market open."""
    return datetime(2024, 7, 14, 12, 0)


@pytest.fixture
def short_segment():
    """A ~111m north-south residential segment in central Kolkata."""
    return RoadSegment(
        road_class=RoadClass.RESIDENTIAL,
        lit=LitStatus.UNKNOWN,
        distance_meters=111.0,
        coordinates=((22.5726, 88.3639), (22.5736, 88.3639)),
        segment_id="way-1",
    )


@pytest.fixture
def fast_straight_route():
    """Arterial-like route: 5 km in 400 s (12.5 m/s), 5 steps."""
    steps = tuple(
        RouteStep(latitude=22.57 + i * 0.01, longitude=88.36, distance_meters=1000, duration_seconds=80)
        for i in range(5)
    )
    return CandidateRoute(
        route_id="A",
        geometry=((22.57, 88.36), (22.62, 88.36)),
        distance_meters=5000,
        duration_seconds=400,
        steps=steps,
    )


@pytest.fixture
def slow_winding_route():
    """Back-street route: 4 km in 1200 s (3.33 m/s), 40 steps."""
    steps = tuple(
        RouteStep(latitude=22.57, longitude=88.36 + i * 0.001, distance_meters=100, duration_seconds=30)
        for i in range(40)
    )
    return CandidateRoute(
        route_id="B",
        geometry=((22.57, 88.36), (22.57, 88.40)),
        distance_meters=4000,
        duration_seconds=1200,
        steps=steps,
    )
