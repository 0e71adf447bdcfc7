"""
Threshold Calculator Service

Instant accept/reject for a trip offer while on the road. The driver sets two
personal floors, dollars per active minute and dollars per mile, and every
offer is checked against the minimum fare each floor implies:

- minByTime  = minutes x perMinFloor, rounded UP to the cent
- minByMiles = miles x dpmFloor, rounded UP to the cent
- minCombined = max(minByTime, minByMiles)

Each check accepts when offer >= its minimum (exact equality accepts).
Rounding is always upward so the minimum never dips below the floor.

Inputs are clamped to >= 0; non-numeric, NaN and infinite values count as 0.
No input makes the calculator raise.
"""

import logging
from typing import Iterable, List, Sequence

from driver_compass.core.numeric import ceil_to_cents, clamp, coerce_number
from driver_compass.models.enums import BindingConstraint, CoverageSegment, Decision
from driver_compass.models.schemas import (
    CoverageSlice,
    FareReferenceRow,
    OfferCoverage,
    ThresholdInput,
    ThresholdResult,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Quick Reference Lengths
# Trip lengths shown in the minutes/miles -> minimum fare reference.
# =============================================================================

QUICK_MINUTES: Sequence[float] = (6, 8, 10, 12, 15, 18, 20, 25, 30)

QUICK_MILES: Sequence[float] = (2, 3, 4, 5, 6, 8, 10)


def _non_negative(value) -> float:
    return clamp(coerce_number(value), 0.0)


def minimum_fare(quantity: float, rate: float) -> float:
    """
    Minimum acceptable fare for a quantity (minutes or miles) at a floor rate.

    Both values are clamped to >= 0 and the product is rounded up to the cent.

    Args:
        quantity: Trip minutes or miles.
        rate: Floor in dollars per minute or per mile.

    Returns:
        Minimum fare in dollars, ceiling-rounded to the cent.
    """
    return ceil_to_cents(_non_negative(quantity) * _non_negative(rate))


def decide(offer: float, threshold: float) -> Decision:
    """Accept iff ``offer >= threshold``."""
    return Decision.ACCEPT if offer >= threshold else Decision.REJECT


def compute_threshold_metrics(threshold_input: ThresholdInput) -> ThresholdResult:
    """
    Compute minimum fares and accept/reject verdicts for one trip offer.

    Args:
        threshold_input: Trip minutes/miles, offer, and the driver's floors.

    Returns:
        ThresholdResult with the three minimums, the binding constraint, a
        verdict per check, and how far the offer falls short of each minimum.
    """
    offer = _non_negative(threshold_input.offer)

    min_by_time = minimum_fare(threshold_input.minutes, threshold_input.perMinFloor)
    min_by_miles = minimum_fare(threshold_input.miles, threshold_input.dpmFloor)
    min_combined = max(min_by_time, min_by_miles)

    # Tie goes to time
    binding = BindingConstraint.TIME if min_by_time >= min_by_miles else BindingConstraint.MILES

    result = ThresholdResult(
        minByTime=min_by_time,
        minByMiles=min_by_miles,
        minCombined=min_combined,
        binding=binding,
        decisionTime=decide(offer, min_by_time),
        decisionMiles=decide(offer, min_by_miles),
        decisionCombined=decide(offer, min_combined),
        offer=offer,
        shortByTime=max(0.0, min_by_time - offer),
        shortByMiles=max(0.0, min_by_miles - offer),
        shortByCombined=max(0.0, min_combined - offer),
    )

    logger.debug(
        f"Threshold check: offer={offer:.2f} minCombined={min_combined:.2f} "
        f"binding={binding.value} decision={result.decisionCombined.value}"
    )
    return result


def compute_offer_coverage(offer: float, required: float) -> OfferCoverage:
    """
    Break an offer down against the required fare.

    When the offer covers the requirement the segments are Required + Over;
    otherwise they are Covered (the whole offer) + Shortfall.

    Args:
        offer: Offered fare in dollars.
        required: Required minimum fare in dollars.

    Returns:
        OfferCoverage with the signed margin and the two-part breakdown.
    """
    offer = _non_negative(offer)
    required = _non_negative(required)
    is_covered = offer >= required

    if is_covered:
        segments = [
            CoverageSlice(name=CoverageSegment.REQUIRED, value=required),
            CoverageSlice(name=CoverageSegment.OVER, value=offer - required),
        ]
    else:
        segments = [
            CoverageSlice(name=CoverageSegment.COVERED, value=offer),
            CoverageSlice(name=CoverageSegment.SHORTFALL, value=required - offer),
        ]

    return OfferCoverage(
        offer=offer,
        required=required,
        margin=offer - required,
        isCovered=is_covered,
        segments=segments,
    )


def build_fare_reference(
    per_min_floor: float,
    dpm_floor: float,
    minutes: Iterable[float] = QUICK_MINUTES,
    miles: Iterable[float] = QUICK_MILES,
) -> List[FareReferenceRow]:
    """
    Build the minutes/miles -> minimum fare quick reference.

    Uses the same rounding rule as compute_threshold_metrics, so a row for
    12 minutes always matches minByTime for a 12-minute trip.

    Args:
        per_min_floor: Dollars per active minute floor.
        dpm_floor: Dollars per mile floor.
        minutes: Trip durations to list.
        miles: Trip distances to list.

    Returns:
        Time rows followed by miles rows.
    """
    rows = [
        FareReferenceRow(
            basis=BindingConstraint.TIME,
            quantity=_non_negative(quantity),
            minimumFare=minimum_fare(quantity, per_min_floor),
        )
        for quantity in minutes
    ]
    rows.extend(
        FareReferenceRow(
            basis=BindingConstraint.MILES,
            quantity=_non_negative(quantity),
            minimumFare=minimum_fare(quantity, dpm_floor),
        )
        for quantity in miles
    )
    return rows
