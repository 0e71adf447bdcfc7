"""
Estimator Calculator Service

Projects daily and monthly earnings from two inputs, hours per day and days per
month, under fixed assumptions:

- 30% of on-app time is idle (no ride)
- every active minute earns at least the $0.60 base floor
- a typical day follows a fixed ride mix by duration:

    | Category | Avg minutes | Rate multiplier | Rides/day |
    |----------|-------------|-----------------|-----------|
    | short    | 8           | x1.08           | 10        |
    | medium   | 15          | x1.00           | 4         |
    | long     | 25          | x0.95           | 2         |

The template day covers PATTERN_MINUTES active minutes. The driver's actual
active minutes scale the template's ride counts proportionally.

Two projections are reported:
- floor:   active minutes x base rate
- blended: sum over categories of scaled count x avg minutes x category rate

blendedPerHr describes the template mix itself (independent of the driver's
hours): base rate x 60 x the count-weighted rate multiplier.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from driver_compass.core.numeric import clamp, coerce_number, safe_divide
from driver_compass.models.enums import RideCategory
from driver_compass.models.schemas import (
    CategoryValues,
    EstimatorInput,
    EstimatorResult,
    RideCategoryBreakdown,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Estimator Constants
# =============================================================================


@dataclass(frozen=True)
class RideMixEntry:
    """One ride category of the template day."""
    label: str
    avg_minutes: float
    rate_multiplier: float
    default_count: int


IDLE_FRACTION: float = 0.30

BASE_PER_MIN: float = 0.60

RIDE_MIX: Dict[RideCategory, RideMixEntry] = {
    RideCategory.SHORT: RideMixEntry("Short (<10 min)", 8, 1.08, 10),
    RideCategory.MEDIUM: RideMixEntry("Medium (10–20 min)", 15, 1.00, 4),
    RideCategory.LONG: RideMixEntry("Long (20+ min)", 25, 0.95, 2),
}

# Active minutes in the template day (190)
PATTERN_MINUTES: float = sum(
    entry.default_count * entry.avg_minutes for entry in RIDE_MIX.values()
)

# Count-weighted rate multiplier of the template day
WEIGHTED_MULTIPLIER: float = safe_divide(
    sum(
        entry.default_count * entry.avg_minutes * entry.rate_multiplier
        for entry in RIDE_MIX.values()
    ),
    PATTERN_MINUTES,
)

BLENDED_PER_HR: float = BASE_PER_MIN * 60 * WEIGHTED_MULTIPLIER


# =============================================================================
# Estimator Calculations
# =============================================================================


def active_minutes_per_day(hours_per_day: float) -> float:
    """
    Active (non-idle) minutes in a day of ``hours_per_day`` on-app hours.

    Idle minutes are subtracted from on-app minutes, so whole-minute inputs
    such as 6 hours give exactly 252 active minutes.
    """
    on_app_minutes = clamp(coerce_number(hours_per_day), 0.0) * 60
    return on_app_minutes - on_app_minutes * IDLE_FRACTION


def category_rate(category: RideCategory) -> float:
    """Dollars per active minute for a ride category."""
    return BASE_PER_MIN * RIDE_MIX[category].rate_multiplier


def compute_estimator_metrics(estimator_input: EstimatorInput) -> EstimatorResult:
    """
    Project daily and monthly earnings for a driver's hours and days.

    Args:
        estimator_input: Hours per day and days per month.

    Returns:
        EstimatorResult with the scaled ride mix, the floor and blended
        projections, and the template's blended hourly rate.
    """
    days = clamp(coerce_number(estimator_input.daysPerMonth), 0.0)
    active_minutes = active_minutes_per_day(estimator_input.hoursPerDay)
    scale = safe_divide(active_minutes, PATTERN_MINUTES)

    categories = []
    for category, entry in RIDE_MIX.items():
        count = entry.default_count * scale
        rate = category_rate(category)
        minutes = count * entry.avg_minutes
        categories.append(
            RideCategoryBreakdown(
                category=category,
                label=entry.label,
                avgMinutes=entry.avg_minutes,
                rateMultiplier=entry.rate_multiplier,
                count=count,
                ratePerMinute=rate,
                minutes=minutes,
                dollars=minutes * rate,
            )
        )

    daily_floor = active_minutes * BASE_PER_MIN
    daily_blended = sum(row.dollars for row in categories)

    # Active minutes per month x base rate
    monthly_floor = active_minutes * days * BASE_PER_MIN
    monthly_blended = daily_blended * days

    logger.debug(
        f"Estimator: activeMinutes={active_minutes:.1f} scale={scale:.4f} "
        f"dailyFloor={daily_floor:.2f} dailyBlended={daily_blended:.2f} days={days}"
    )

    return EstimatorResult(
        activeMinutesPerDay=active_minutes,
        activeHoursPerDay=active_minutes / 60,
        scale=scale,
        dailyCounts=CategoryValues(**{row.category.value: row.count for row in categories}),
        perMin=CategoryValues(**{row.category.value: row.ratePerMinute for row in categories}),
        categories=categories,
        floorPerHr=BASE_PER_MIN * 60,
        dailyEarningsFloor=daily_floor,
        dailyEarningsBlended=daily_blended,
        monthlyEarningsFloor=monthly_floor,
        monthlyEarningsBlended=monthly_blended,
        blendedPerHr=BLENDED_PER_HR,
    )
