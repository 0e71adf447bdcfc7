"""
Driver Compass Services Module

Contains the calculators behind the Driver Compass API. Each service is a set of
pure functions: one input record in, one result record out, no shared state.

Services:
- threshold: Accept/reject check for a trip offer against $/min and $/mile floors
- planner: Monthly goal -> daily target, required hourly rates, per-ride table
- estimator: Hours/days -> floor and blended earnings projections
- formatting: Currency and number display helpers

All services are designed to be consumed by the API layer (driver_compass/api/).
"""

# =============================================================================
# Threshold Service Exports
# =============================================================================

from driver_compass.services.threshold import (
    compute_threshold_metrics,
    compute_offer_coverage,
    build_fare_reference,
    minimum_fare,
    decide,
    QUICK_MINUTES,
    QUICK_MILES,
)

# =============================================================================
# Planner Service Exports
# =============================================================================

from driver_compass.services.planner import (
    compute_planner_metrics,
    build_planner_threshold_rows,
    sanitize_days_in_month,
    days_in_calendar_month,
    DPM_FLOORS,
)

# =============================================================================
# Estimator Service Exports
# =============================================================================

from driver_compass.services.estimator import (
    compute_estimator_metrics,
    active_minutes_per_day,
    category_rate,
    BASE_PER_MIN,
    BLENDED_PER_HR,
    IDLE_FRACTION,
    PATTERN_MINUTES,
    RIDE_MIX,
    WEIGHTED_MULTIPLIER,
)

# =============================================================================
# Formatting Exports
# =============================================================================

from driver_compass.services.formatting import (
    format_currency,
    format_number,
    format_margin,
)


__all__ = [
    # Threshold
    "compute_threshold_metrics",
    "compute_offer_coverage",
    "build_fare_reference",
    "minimum_fare",
    "decide",
    "QUICK_MINUTES",
    "QUICK_MILES",
    # Planner
    "compute_planner_metrics",
    "build_planner_threshold_rows",
    "sanitize_days_in_month",
    "days_in_calendar_month",
    "DPM_FLOORS",
    # Estimator
    "compute_estimator_metrics",
    "active_minutes_per_day",
    "category_rate",
    "BASE_PER_MIN",
    "BLENDED_PER_HR",
    "IDLE_FRACTION",
    "PATTERN_MINUTES",
    "RIDE_MIX",
    "WEIGHTED_MULTIPLIER",
    # Formatting
    "format_currency",
    "format_number",
    "format_margin",
]
