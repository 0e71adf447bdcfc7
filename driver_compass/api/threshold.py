"""
FastAPI router module for the on-the-road threshold calculator.

Key Endpoints:
- GET /threshold/defaults - Default inputs (floors and a sample trip) from settings
- POST /threshold - Minimum fares, verdicts, offer coverage and display strings
- GET /threshold/reference - Minutes/miles -> minimum fare quick reference

Request bodies may omit any field; omitted fields take the configured defaults.
Numeric fields are coerced rather than rejected (see models.schemas).

Dependencies:
- driver_compass/core/dependencies.py: SettingsDep for default inputs
- driver_compass/services/threshold.py: the calculator
- driver_compass/services/formatting.py: display strings
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from driver_compass.api.common import merge_with_defaults
from driver_compass.core.config import Settings
from driver_compass.core.dependencies import SettingsDep
from driver_compass.models.schemas import (
    FareReferenceRow,
    ThresholdInput,
    ThresholdSummary,
)
from driver_compass.services.formatting import format_currency, format_margin
from driver_compass.services.threshold import (
    build_fare_reference,
    compute_offer_coverage,
    compute_threshold_metrics,
)


# =============================================================================
# Module Configuration
# =============================================================================

logger = logging.getLogger(__name__)

router = APIRouter()


def default_threshold_input(settings: Settings) -> ThresholdInput:
    """Build the default threshold input from settings."""
    return ThresholdInput(
        minutes=settings.default_minutes,
        miles=settings.default_miles,
        offer=settings.default_offer,
        perMinFloor=settings.default_per_min_floor,
        dpmFloor=settings.default_dpm_floor,
    )


# =============================================================================
# GET /threshold/defaults
# =============================================================================


@router.get("/defaults", response_model=ThresholdInput)
async def get_threshold_defaults(settings: SettingsDep) -> ThresholdInput:
    """Return the default trip and floors."""
    return default_threshold_input(settings)


# =============================================================================
# POST /threshold - Evaluate an offer
# =============================================================================


@router.post("", response_model=ThresholdSummary)
async def evaluate_offer(
    settings: SettingsDep,
    body: Optional[ThresholdInput] = None,
) -> ThresholdSummary:
    """
    Evaluate a trip offer against the driver's floors.

    Args:
        settings: Application settings (supplies omitted fields).
        body: Partial or complete ThresholdInput.

    Returns:
        ThresholdSummary with the result, the combined-check coverage breakdown
        and preformatted strings.

    Raises:
        HTTPException 500: If the calculation fails unexpectedly.

    Example Request:
        POST /threshold
        {"minutes": 15, "miles": 5, "offer": 8.9}
    """
    try:
        threshold_input = merge_with_defaults(
            ThresholdInput, body, default_threshold_input(settings)
        )
        result = compute_threshold_metrics(threshold_input)
        coverage = compute_offer_coverage(result.offer, result.minCombined)

        display = {
            "minByTime": format_currency(result.minByTime),
            "minByMiles": format_currency(result.minByMiles),
            "minCombined": format_currency(result.minCombined),
            "offer": format_currency(result.offer),
            "margin": format_margin(result.offer, result.minCombined),
        }

        logger.info(
            f"Evaluated offer {result.offer:.2f} against {result.minCombined:.2f}: "
            f"{result.decisionCombined.value}"
        )
        return ThresholdSummary(result=result, coverage=coverage, display=display)

    except Exception as e:
        logger.exception("Error evaluating offer")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to evaluate offer: {str(e)}"
        )


# =============================================================================
# GET /threshold/reference - Quick reference table
# =============================================================================


@router.get("/reference", response_model=List[FareReferenceRow])
async def get_fare_reference(
    settings: SettingsDep,
    perMinFloor: Optional[float] = Query(default=None, description="$/min floor (default from settings)"),
    dpmFloor: Optional[float] = Query(default=None, description="$/mile floor (default from settings)"),
) -> List[FareReferenceRow]:
    """
    Return minimum fares for common trip lengths at the given floors.
    """
    per_min_floor = settings.default_per_min_floor if perMinFloor is None else perMinFloor
    dpm_floor = settings.default_dpm_floor if dpmFloor is None else dpmFloor
    return build_fare_reference(per_min_floor, dpm_floor)
