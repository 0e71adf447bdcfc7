"""
FastAPI router module for the monthly earnings estimator.

Key Endpoints:
- GET /estimator/defaults - Default hours per day and days per month
- POST /estimator - Floor and blended daily/monthly projections
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from driver_compass.api.common import merge_with_defaults
from driver_compass.core.config import Settings
from driver_compass.core.dependencies import SettingsDep
from driver_compass.models.schemas import EstimatorInput, EstimatorResult
from driver_compass.services.estimator import compute_estimator_metrics


logger = logging.getLogger(__name__)

router = APIRouter()


def default_estimator_input(settings: Settings) -> EstimatorInput:
    """Build the default estimator input from settings."""
    return EstimatorInput(
        hoursPerDay=settings.default_estimator_hours_per_day,
        daysPerMonth=settings.default_estimator_days_per_month,
    )


@router.get("/defaults", response_model=EstimatorInput)
async def get_estimator_defaults(settings: SettingsDep) -> EstimatorInput:
    """Return the default estimator inputs."""
    return default_estimator_input(settings)


@router.post("", response_model=EstimatorResult)
async def estimate_month(
    settings: SettingsDep,
    body: Optional[EstimatorInput] = None,
) -> EstimatorResult:
    """
    Project earnings for the given hours per day and days per month.

    Raises:
        HTTPException 500: If the calculation fails unexpectedly.
    """
    try:
        estimator_input = merge_with_defaults(
            EstimatorInput, body, default_estimator_input(settings)
        )
        result = compute_estimator_metrics(estimator_input)
        logger.info(
            f"Estimated {estimator_input.hoursPerDay:g}h x {estimator_input.daysPerMonth:g} days: "
            f"floor {result.monthlyEarningsFloor:.0f}, blended {result.monthlyEarningsBlended:.0f}"
        )
        return result

    except Exception as e:
        logger.exception("Error computing estimator metrics")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to compute estimator metrics: {str(e)}"
        )
