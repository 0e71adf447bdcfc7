"""
Package initialization file for Driver Compass models.

Exports all Pydantic schemas and enumerations from schemas.py and enums.py so
other modules can import data models from driver_compass.models directly.

Usage:
    from driver_compass.models import (
        Decision,
        ThresholdInput,
        ThresholdResult,
        PlannerInput,
        # ... etc
    )
"""

# =============================================================================
# Enums - Import and re-export all enumerations from enums.py
# =============================================================================

from driver_compass.models.enums import (
    BindingConstraint,
    CoverageSegment,
    Decision,
    RideCategory,
)


# =============================================================================
# Schemas - Import and re-export all Pydantic models from schemas.py
# =============================================================================

from driver_compass.models.schemas import (
    LenientFloat,
    # -------------------------------------------------------------------------
    # Threshold Calculator
    # -------------------------------------------------------------------------
    ThresholdInput,
    ThresholdResult,
    CoverageSlice,
    OfferCoverage,
    FareReferenceRow,
    ThresholdSummary,
    # -------------------------------------------------------------------------
    # Planner Calculator
    # -------------------------------------------------------------------------
    PlannerInput,
    PlannerThresholdRow,
    PlannerResult,
    # -------------------------------------------------------------------------
    # Estimator Calculator
    # -------------------------------------------------------------------------
    EstimatorInput,
    CategoryValues,
    RideCategoryBreakdown,
    EstimatorResult,
)


__all__ = [
    # Enums
    "BindingConstraint",
    "CoverageSegment",
    "Decision",
    "RideCategory",
    # Field types
    "LenientFloat",
    # Threshold Calculator
    "ThresholdInput",
    "ThresholdResult",
    "CoverageSlice",
    "OfferCoverage",
    "FareReferenceRow",
    "ThresholdSummary",
    # Planner Calculator
    "PlannerInput",
    "PlannerThresholdRow",
    "PlannerResult",
    # Estimator Calculator
    "EstimatorInput",
    "CategoryValues",
    "RideCategoryBreakdown",
    "EstimatorResult",
]
