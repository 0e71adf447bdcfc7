"""
FastAPI router module for the monthly earnings planner.

Key Endpoints:
- GET /planner/defaults - Default inputs; ``year``/``month`` set daysInMonth to the calendar length
- POST /planner - Daily target, required hourly rates, per-ride bracket table
- GET /planner/sanitize-days - Sanitized day count for a raw entry

Dependencies:
- driver_compass/core/dependencies.py: SettingsDep for default inputs
- driver_compass/services/planner.py: the calculator and day-count helpers
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from driver_compass.api.common import merge_with_defaults
from driver_compass.core.config import Settings
from driver_compass.core.dependencies import SettingsDep
from driver_compass.models.schemas import PlannerInput, PlannerResult
from driver_compass.services.planner import (
    compute_planner_metrics,
    days_in_calendar_month,
    sanitize_days_in_month,
)


logger = logging.getLogger(__name__)

router = APIRouter()


def default_planner_input(settings: Settings) -> PlannerInput:
    """Build the default planner input from settings."""
    return PlannerInput(
        earningsGoal=settings.default_earnings_goal,
        daysInMonth=settings.default_days_in_month,
        hoursPerDay=settings.default_hours_per_day,
        idlePercent=settings.default_idle_percent,
    )


# =============================================================================
# GET /planner/defaults
# =============================================================================


@router.get("/defaults", response_model=PlannerInput)
async def get_planner_defaults(
    settings: SettingsDep,
    year: Optional[int] = Query(default=None, ge=1, le=9999, description="Calendar year"),
    month: Optional[int] = Query(default=None, ge=1, le=12, description="Calendar month (1-12)"),
) -> PlannerInput:
    """
    Return the default planner inputs.

    When both ``year`` and ``month`` are given, daysInMonth is the number of
    calendar days in that month instead of the configured default.
    """
    defaults = default_planner_input(settings)
    if year is not None and month is not None:
        defaults = defaults.model_copy(
            update={"daysInMonth": float(days_in_calendar_month(year, month))}
        )
    return defaults


# =============================================================================
# POST /planner
# =============================================================================


@router.post("", response_model=PlannerResult)
async def plan_month(
    settings: SettingsDep,
    body: Optional[PlannerInput] = None,
) -> PlannerResult:
    """
    Compute the daily target and required rates for a monthly goal.

    Args:
        settings: Application settings (supplies omitted fields).
        body: Partial or complete PlannerInput.

    Returns:
        PlannerResult with the per-ride bracket table.

    Raises:
        HTTPException 500: If the calculation fails unexpectedly.
    """
    try:
        planner_input = merge_with_defaults(
            PlannerInput, body, default_planner_input(settings)
        )
        result = compute_planner_metrics(planner_input)
        logger.info(
            f"Planned goal {planner_input.earningsGoal:.2f} over {result.daysInMonth:g} days: "
            f"{result.dailyTarget:.2f}/day"
        )
        return result

    except Exception as e:
        logger.exception("Error computing planner metrics")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to compute planner metrics: {str(e)}"
        )


# =============================================================================
# GET /planner/sanitize-days
# =============================================================================


@router.get("/sanitize-days")
async def sanitize_days(
    value: Optional[str] = Query(default=None, description="Raw day count as entered"),
) -> dict:
    """
    Sanitize a raw day-count entry.

    Returns:
        {"daysInMonth": <sanitized value>}
    """
    return {"daysInMonth": sanitize_days_in_month(value)}
