"""
Planner Calculator Service

Turns a monthly earnings goal into the daily target and the hourly and
per-minute rates a driver needs to hit it, plus a per-ride table for three
daily ride-volume brackets.

Derivation:
- dailyTarget     = earningsGoal / daysInMonth
- effectiveHours  = max(0.1, hoursPerDay x (1 - idleFraction))
- dphAllIn        = dailyTarget / hoursPerDay
- dphActive       = dailyTarget / effectiveHours
- perMinuteActive = dphActive / 60

Input sanitizing:
- daysInMonth: non-finite or < 1 falls back to 1 (sanitize_days_in_month)
- hoursPerDay: floored at 0.1
- idlePercent: clamped to [0, 95] so effective hours never reach zero

Every output is finite for every input.
"""

import calendar
import logging
import math
from typing import Any, Dict, List

from driver_compass.core.numeric import clamp, coerce_number, safe_divide
from driver_compass.models.schemas import (
    PlannerInput,
    PlannerResult,
    PlannerThresholdRow,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Planner Constants
# =============================================================================

MIN_HOURS_PER_DAY: float = 0.1

MAX_IDLE_PERCENT: float = 95.0

# $/mile floors per daily ride-volume bracket
DPM_FLOORS: Dict[str, float] = {
    "r10": 1.40,
    "r10to20": 1.70,
    "r20to25": 2.40,
}

# (label, rides used for the per-ride split, bracket key)
# Ranged brackets use their upper bound, the conservative end.
PLANNER_BRACKETS = (
    ("10 rides", 10, "r10"),
    ("10–20 rides (using 20)", 20, "r10to20"),
    ("20–25 rides (using 25)", 25, "r20to25"),
)


# =============================================================================
# Sanitizing Helpers
# =============================================================================


def sanitize_days_in_month(value: Any, fallback: float = 1.0) -> float:
    """
    Sanitize a days-per-month entry.

    Used wherever a day count is entered and by compute_planner_metrics.

    Args:
        value: Raw day count.
        fallback: Value returned for non-numeric, non-finite or < 1 input.

    Returns:
        ``value`` as a float when it is finite and >= 1, otherwise ``fallback``.

    Example:
        >>> sanitize_days_in_month(0)
        1.0
        >>> sanitize_days_in_month(22)
        22.0
    """
    numeric = coerce_number(value, default=float("nan"))
    if math.isnan(numeric) or numeric < 1:
        return fallback
    return numeric


def days_in_calendar_month(year: int, month: int) -> int:
    """
    Number of calendar days in a month.

    Args:
        year: Four-digit year.
        month: Month number, 1-12.

    Returns:
        28-31.

    Raises:
        ValueError: If month is outside 1-12 (raised by calendar).
    """
    return calendar.monthrange(year, month)[1]


# =============================================================================
# Planner Calculations
# =============================================================================


def build_planner_threshold_rows(daily_target: float) -> List[PlannerThresholdRow]:
    """
    Build the per-ride threshold table for the three ride-volume brackets.

    For each bracket the daily target is split evenly across the rides, and the
    bracket's $/mile floor converts that per-ride amount into the longest trip
    (in miles) it can cover.

    Args:
        daily_target: Dollars needed per day.

    Returns:
        One row per bracket, in bracket order.
    """
    rows = []
    for label, rides_used, floor_key in PLANNER_BRACKETS:
        dpm_floor = DPM_FLOORS[floor_key]
        min_dollars = safe_divide(daily_target, rides_used)
        rows.append(
            PlannerThresholdRow(
                label=label,
                ridesUsed=rides_used,
                dpmFloor=dpm_floor,
                minDollarsPerRide=min_dollars,
                maxMilesPerRide=safe_divide(min_dollars, dpm_floor),
            )
        )
    return rows


def compute_planner_metrics(planner_input: PlannerInput) -> PlannerResult:
    """
    Compute the daily target and required hourly rates for a monthly goal.

    Args:
        planner_input: Monthly goal, days worked, hours per day and idle percent.

    Returns:
        PlannerResult including the per-ride bracket table.
    """
    goal = clamp(coerce_number(planner_input.earningsGoal), 0.0)
    days = sanitize_days_in_month(planner_input.daysInMonth)
    hours = clamp(coerce_number(planner_input.hoursPerDay), MIN_HOURS_PER_DAY)
    idle_fraction = clamp(coerce_number(planner_input.idlePercent), 0.0, MAX_IDLE_PERCENT) / 100

    daily_target = goal / days if days > 0 else 0.0
    effective_hours = max(MIN_HOURS_PER_DAY, hours * (1 - idle_fraction))
    dph_all_in = daily_target / hours
    dph_active = safe_divide(daily_target, effective_hours)
    per_minute_active = dph_active / 60

    logger.debug(
        f"Planner: goal={goal:.2f} days={days} hours={hours} idle={idle_fraction:.2f} "
        f"-> dailyTarget={daily_target:.2f} dphActive={dph_active:.2f}"
    )

    return PlannerResult(
        dailyTarget=daily_target,
        dphAllIn=dph_all_in,
        dphActive=dph_active,
        effectiveHours=effective_hours,
        perMinuteActive=per_minute_active,
        daysInMonth=days,
        thresholds=build_planner_threshold_rows(daily_target),
    )
