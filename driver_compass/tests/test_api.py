"""
HTTP API Tests

Exercises the FastAPI app in-process through httpx.AsyncClient:
- Health and root endpoints
- /threshold: defaults, partial bodies, boundary decisions, quick reference
- /planner: defaults (including calendar month lengths), planning, day sanitizing
- /estimator: defaults and projections
- Settings overrides through environment variables
"""

import pytest

from driver_compass.core.dependencies import get_settings_dependency
from driver_compass.core.config import Settings
from driver_compass.services.threshold import QUICK_MILES, QUICK_MINUTES


pytestmark = [pytest.mark.api, pytest.mark.asyncio]


# =============================================================================
# Test Class: TestServiceEndpoints
# =============================================================================


class TestServiceEndpoints:
    """Tests for /health and /."""

    async def test_health(self, client):
        resp = await client.get("/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}

    async def test_root(self, client):
        resp = await client.get("/")

        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Driver Compass API"
        assert data["docs"] == "/docs"


# =============================================================================
# Test Class: TestThresholdEndpoints
# =============================================================================


class TestThresholdEndpoints:
    """Tests for the /threshold router."""

    async def test_defaults(self, client):
        resp = await client.get("/threshold/defaults")

        assert resp.status_code == 200
        assert resp.json() == {
            "minutes": 12.0,
            "miles": 5.0,
            "offer": 10.0,
            "perMinFloor": 0.6,
            "dpmFloor": 1.7,
        }

    async def test_evaluate_defaults_without_body(self, client):
        resp = await client.post("/threshold")

        assert resp.status_code == 200
        result = resp.json()["result"]
        assert result["minByTime"] == pytest.approx(7.2)
        assert result["minByMiles"] == pytest.approx(8.5)
        assert result["binding"] == "miles"
        assert result["decisionCombined"] == "accept"

    @pytest.mark.scenario
    async def test_partial_body_rejects_below_combined_minimum(self, client):
        resp = await client.post("/threshold", json={"minutes": 15, "offer": 8.9})

        assert resp.status_code == 200
        data = resp.json()
        assert data["result"]["minCombined"] == pytest.approx(9.0)
        assert data["result"]["binding"] == "time"
        assert data["result"]["decisionMiles"] == "accept"
        assert data["result"]["decisionCombined"] == "reject"
        assert data["coverage"]["isCovered"] is False
        assert data["display"]["minCombined"] == "$9.00"
        assert data["display"]["margin"] == "-$0.10 short"

    @pytest.mark.scenario
    async def test_offer_equal_to_minimum_accepts(self, client):
        resp = await client.post("/threshold", json={"minutes": 15, "offer": 9})

        assert resp.status_code == 200
        data = resp.json()
        assert data["result"]["decisionCombined"] == "accept"
        assert data["display"]["margin"] == "+$0.00 over"

    async def test_non_numeric_fields_are_coerced(self, client):
        resp = await client.post("/threshold", json={"minutes": "abc", "offer": None})

        assert resp.status_code == 200
        result = resp.json()["result"]
        assert result["minByTime"] == 0.0
        assert result["offer"] == 0.0
        assert result["decisionCombined"] == "reject"

    async def test_integer_too_large_for_float_is_coerced(self, client):
        body = '{"minutes": 1' + "0" * 400 + "}"
        resp = await client.post(
            "/threshold", content=body, headers={"Content-Type": "application/json"}
        )

        assert resp.status_code == 200
        result = resp.json()["result"]
        assert result["minByTime"] == 0.0
        assert result["minByMiles"] == pytest.approx(8.5)
        assert result["decisionCombined"] == "accept"

    async def test_reference_uses_default_floors(self, client):
        resp = await client.get("/threshold/reference")

        assert resp.status_code == 200
        rows = resp.json()
        assert len(rows) == len(QUICK_MINUTES) + len(QUICK_MILES)
        assert rows[0]["basis"] == "time"
        assert rows[-1]["basis"] == "miles"

    async def test_reference_with_custom_floors(self, client):
        resp = await client.get("/threshold/reference", params={"perMinFloor": 1.0, "dpmFloor": 2.0})

        assert resp.status_code == 200
        rows = resp.json()
        assert rows[0]["minimumFare"] == pytest.approx(QUICK_MINUTES[0] * 1.0)
        assert rows[len(QUICK_MINUTES)]["minimumFare"] == pytest.approx(QUICK_MILES[0] * 2.0)


# =============================================================================
# Test Class: TestPlannerEndpoints
# =============================================================================


class TestPlannerEndpoints:
    """Tests for the /planner router."""

    async def test_defaults(self, client):
        resp = await client.get("/planner/defaults")

        assert resp.status_code == 200
        assert resp.json()["daysInMonth"] == 30.0
        assert resp.json()["earningsGoal"] == 1600.0

    @pytest.mark.parametrize("year,month,expected", [(2024, 2, 29), (2025, 2, 28), (2025, 7, 31)])
    async def test_defaults_for_calendar_month(self, client, year, month, expected):
        resp = await client.get("/planner/defaults", params={"year": year, "month": month})

        assert resp.status_code == 200
        assert resp.json()["daysInMonth"] == expected

    async def test_defaults_rejects_invalid_month(self, client):
        resp = await client.get("/planner/defaults", params={"year": 2025, "month": 13})

        assert resp.status_code == 422

    async def test_plan_defaults(self, client):
        resp = await client.post("/planner", json={})

        assert resp.status_code == 200
        data = resp.json()
        assert data["dailyTarget"] == pytest.approx(1600 / 30)
        assert data["effectiveHours"] == pytest.approx(4.2)
        assert [row["ridesUsed"] for row in data["thresholds"]] == [10, 20, 25]

    async def test_plan_with_zero_days_uses_one(self, client):
        resp = await client.post("/planner", json={"daysInMonth": 0})

        assert resp.status_code == 200
        data = resp.json()
        assert data["daysInMonth"] == 1.0
        assert data["dailyTarget"] == pytest.approx(1600)

    @pytest.mark.parametrize("value,expected", [("abc", 1.0), ("0", 1.0), ("-3", 1.0), ("22", 22.0)])
    async def test_sanitize_days(self, client, value, expected):
        resp = await client.get("/planner/sanitize-days", params={"value": value})

        assert resp.status_code == 200
        assert resp.json() == {"daysInMonth": expected}

    async def test_plan_with_huge_day_count_uses_one(self, client):
        resp = await client.post("/planner", json={"daysInMonth": 10 ** 400})

        assert resp.status_code == 200
        assert resp.json()["daysInMonth"] == 1.0

    async def test_sanitize_days_without_value(self, client):
        resp = await client.get("/planner/sanitize-days")

        assert resp.json() == {"daysInMonth": 1.0}


# =============================================================================
# Test Class: TestEstimatorEndpoints
# =============================================================================


class TestEstimatorEndpoints:
    """Tests for the /estimator router."""

    async def test_defaults(self, client):
        resp = await client.get("/estimator/defaults")

        assert resp.status_code == 200
        assert resp.json() == {"hoursPerDay": 6.0, "daysPerMonth": 25.0}

    @pytest.mark.scenario
    async def test_estimate_defaults(self, client):
        resp = await client.post("/estimator")

        assert resp.status_code == 200
        data = resp.json()
        assert data["activeMinutesPerDay"] == 252
        assert data["monthlyEarningsFloor"] == 3780
        assert data["blendedPerHr"] == pytest.approx(36.74, abs=0.01)
        assert len(data["categories"]) == 3

    async def test_estimate_partial_body(self, client):
        resp = await client.post("/estimator", json={"daysPerMonth": 0})

        assert resp.status_code == 200
        data = resp.json()
        assert data["dailyEarningsFloor"] == pytest.approx(151.2)
        assert data["monthlyEarningsFloor"] == 0.0


# =============================================================================
# Test Class: TestSettingsOverrides
# =============================================================================


class TestSettingsOverrides:
    """Configured defaults flow into the routers."""

    async def test_environment_overrides_defaults(self, client, monkeypatch):
        monkeypatch.setenv("DEFAULT_OFFER", "20")
        monkeypatch.setenv("DEFAULT_PER_MIN_FLOOR", "0.75")

        resp = await client.get("/threshold/defaults")

        assert resp.json()["offer"] == 20.0
        assert resp.json()["perMinFloor"] == 0.75

    async def test_dependency_override(self, app, client):
        app.dependency_overrides[get_settings_dependency] = lambda: Settings(
            default_estimator_days_per_month=10
        )
        try:
            resp = await client.post("/estimator")
        finally:
            app.dependency_overrides.clear()

        assert resp.json()["monthlyEarningsFloor"] == pytest.approx(252 * 10 * 0.6)
