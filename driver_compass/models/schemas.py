"""
Pydantic input/result models for the Driver Compass calculators.

Every calculator takes one input record and returns one result record. Input
records are lenient: each numeric field passes through coerce_number before
validation, so blank, non-numeric, NaN and infinite values become 0 instead of
failing. Range clamping is left to the calculators, which keeps the records
usable as plain JSON request bodies.

Result records are frozen; they are recomputed in full on every call.

Field names are camelCase because they are the JSON contract of the API.
"""

from typing import Annotated, Dict, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from driver_compass.core.numeric import coerce_number
from driver_compass.models.enums import (
    BindingConstraint,
    CoverageSegment,
    Decision,
    RideCategory,
)


# Any value -> finite float (unusable values become 0.0)
LenientFloat = Annotated[float, BeforeValidator(coerce_number)]


# =============================================================================
# Threshold Calculator Models
# =============================================================================


class ThresholdInput(BaseModel):
    """
    Input for the on-the-road threshold calculator.

    Contains the trip as offered (minutes, miles, offer) and the driver's
    two personal rate floors.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "minutes": 12,
                "miles": 5,
                "offer": 9,
                "perMinFloor": 0.6,
                "dpmFloor": 1.7
            }
        }
    )

    minutes: LenientFloat = Field(
        default=0.0,
        description="Trip duration in minutes"
    )
    miles: LenientFloat = Field(
        default=0.0,
        description="Trip distance in miles"
    )
    offer: LenientFloat = Field(
        default=0.0,
        description="Offered fare in dollars"
    )
    perMinFloor: LenientFloat = Field(
        default=0.0,
        description="Minimum acceptable dollars per active minute"
    )
    dpmFloor: LenientFloat = Field(
        default=0.0,
        description="Minimum acceptable dollars per mile"
    )


class ThresholdResult(BaseModel):
    """
    Minimum fares and accept/reject verdicts for one trip offer.

    minByTime and minByMiles are rounded up to the cent. The combined check
    uses the larger of the two; ``binding`` names which one governed.
    """
    model_config = ConfigDict(frozen=True)

    minByTime: float = Field(..., description="Minimum fare from the $/min floor")
    minByMiles: float = Field(..., description="Minimum fare from the $/mile floor")
    minCombined: float = Field(..., description="max(minByTime, minByMiles)")
    binding: BindingConstraint = Field(..., description="Check that set minCombined")
    decisionTime: Decision
    decisionMiles: Decision
    decisionCombined: Decision
    offer: float = Field(..., description="Offer after clamping")
    shortByTime: float = Field(..., ge=0.0, description="Amount the offer falls short of minByTime")
    shortByMiles: float = Field(..., ge=0.0, description="Amount the offer falls short of minByMiles")
    shortByCombined: float = Field(..., ge=0.0, description="Amount the offer falls short of minCombined")


class CoverageSlice(BaseModel):
    """One labelled part of the offer coverage breakdown."""
    model_config = ConfigDict(frozen=True)

    name: CoverageSegment
    value: float


class OfferCoverage(BaseModel):
    """
    How an offer compares to the required fare.

    ``margin`` is offer - required (negative when short). ``segments`` always
    has two entries and sums to max(offer, required).
    """
    model_config = ConfigDict(frozen=True)

    offer: float
    required: float
    margin: float
    isCovered: bool
    segments: List[CoverageSlice]


class FareReferenceRow(BaseModel):
    """Quick-reference minimum fare for a trip length (minutes or miles)."""
    model_config = ConfigDict(frozen=True)

    basis: BindingConstraint
    quantity: float
    minimumFare: float


class ThresholdSummary(BaseModel):
    """API response bundling the threshold result with display strings."""
    model_config = ConfigDict(frozen=True)

    result: ThresholdResult
    coverage: OfferCoverage
    display: Dict[str, str] = Field(default_factory=dict, description="Formatted values for display")


# =============================================================================
# Planner Calculator Models
# =============================================================================


class PlannerInput(BaseModel):
    """
    Input for the monthly earnings planner.

    daysInMonth is the number of days doing rides, not calendar days.
    idlePercent is the share of on-app time spent without a ride (0-95).
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "earningsGoal": 1600,
                "daysInMonth": 30,
                "hoursPerDay": 6,
                "idlePercent": 30
            }
        }
    )

    earningsGoal: LenientFloat = Field(
        default=0.0,
        description="Monthly earnings goal in dollars"
    )
    daysInMonth: LenientFloat = Field(
        default=0.0,
        description="Days doing rides this month (sanitized to >= 1)"
    )
    hoursPerDay: LenientFloat = Field(
        default=0.0,
        description="On-app hours per day (floored at 0.1)"
    )
    idlePercent: LenientFloat = Field(
        default=0.0,
        description="Percent of on-app time without a ride (clamped to 0-95)"
    )


class PlannerThresholdRow(BaseModel):
    """Per-ride minimum for one daily ride-volume bracket."""
    model_config = ConfigDict(frozen=True)

    label: str
    ridesUsed: int
    dpmFloor: float = Field(..., description="$/mile floor of the bracket")
    minDollarsPerRide: float
    maxMilesPerRide: float


class PlannerResult(BaseModel):
    """Daily target and the hourly/per-minute rates needed to reach it."""
    model_config = ConfigDict(frozen=True)

    dailyTarget: float
    dphAllIn: float = Field(..., description="Dollars per on-app hour")
    dphActive: float = Field(..., description="Dollars per active (non-idle) hour")
    effectiveHours: float = Field(..., description="Active hours per day")
    perMinuteActive: float = Field(..., description="Dollars per active minute")
    daysInMonth: float = Field(..., description="Sanitized day count used")
    thresholds: List[PlannerThresholdRow]


# =============================================================================
# Estimator Calculator Models
# =============================================================================


class EstimatorInput(BaseModel):
    """Input for the monthly earnings estimator."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "hoursPerDay": 6,
                "daysPerMonth": 25
            }
        }
    )

    hoursPerDay: LenientFloat = Field(
        default=0.0,
        description="On-app hours per day"
    )
    daysPerMonth: LenientFloat = Field(
        default=0.0,
        description="Days driven per month"
    )


class CategoryValues(BaseModel):
    """One value per ride category."""
    model_config = ConfigDict(frozen=True)

    short: float
    medium: float
    long: float


class RideCategoryBreakdown(BaseModel):
    """Scaled daily volume and earnings for one ride category."""
    model_config = ConfigDict(frozen=True)

    category: RideCategory
    label: str
    avgMinutes: float
    rateMultiplier: float
    count: float = Field(..., description="Scaled rides per day")
    ratePerMinute: float
    minutes: float = Field(..., description="Active minutes per day in this category")
    dollars: float = Field(..., description="Daily earnings from this category")


class EstimatorResult(BaseModel):
    """
    Projected daily and monthly earnings.

    The floor projection prices every active minute at the base rate; the
    blended projection prices the ride mix at each category's rate.
    """
    model_config = ConfigDict(frozen=True)

    activeMinutesPerDay: float
    activeHoursPerDay: float
    scale: float = Field(..., description="Active minutes / template pattern minutes")
    dailyCounts: CategoryValues
    perMin: CategoryValues
    categories: List[RideCategoryBreakdown]
    floorPerHr: float
    dailyEarningsFloor: float
    dailyEarningsBlended: float
    monthlyEarningsFloor: float
    monthlyEarningsBlended: float
    blendedPerHr: float
