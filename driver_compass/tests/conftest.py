"""
Pytest Configuration and Shared Fixtures for Driver Compass Tests.

This module provides fixtures and configuration for all backend tests:
- Settings isolation (the get_settings cache is cleared around every test)
- Baseline calculator inputs matching the default values drivers start from
- An httpx AsyncClient bound to the FastAPI app through ASGITransport

Dependencies:
- pytest
- pytest-asyncio
- httpx
"""

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from driver_compass.core.config import get_settings
from driver_compass.models import EstimatorInput, PlannerInput, ThresholdInput


# ============================================================
# PYTEST HOOKS
# ============================================================

def pytest_configure(config) -> None:
    """
    Configure custom pytest markers for test organization.

    Custom markers defined:
    - api: Tests that exercise the HTTP layer
    - scenario: Worked examples with known published figures

    Usage:
        pytest -m "not api"
    """
    config.addinivalue_line(
        'markers',
        'api: marks tests that go through the FastAPI app'
    )
    config.addinivalue_line(
        'markers',
        'scenario: marks worked-example tests with known figures'
    )


# ============================================================
# SETTINGS FIXTURES
# ============================================================

@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Clear the cached Settings before and after each test.

    Tests that set environment variables with monkeypatch see a fresh
    Settings instance built from them.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================
# INPUT FIXTURES
# ============================================================

@pytest.fixture
def threshold_input() -> ThresholdInput:
    """12 minute, 5 mile trip offered at $9 with $0.60/min and $1.70/mi floors."""
    return ThresholdInput(minutes=12, miles=5, offer=9, perMinFloor=0.6, dpmFloor=1.7)


@pytest.fixture
def planner_input() -> PlannerInput:
    """$1,600 goal over 30 days, 6 hours/day, 30% idle."""
    return PlannerInput(earningsGoal=1600, daysInMonth=30, hoursPerDay=6, idlePercent=30)


@pytest.fixture
def estimator_input() -> EstimatorInput:
    """6 hours/day, 25 days/month."""
    return EstimatorInput(hoursPerDay=6, daysPerMonth=25)


# ============================================================
# API FIXTURES
# ============================================================

@pytest.fixture
def app() -> FastAPI:
    """The FastAPI application under test."""
    from driver_compass.main import app as fastapi_app

    return fastapi_app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client talking to the app in-process.

    Example:
        @pytest.mark.asyncio
        async def test_health(client):
            resp = await client.get("/health")
            assert resp.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
