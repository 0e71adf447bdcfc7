"""
Enumeration definitions for the Driver Compass backend.

All enums inherit from both `str` and `Enum` to ensure JSON serialization
compatibility with Pydantic models, so results serialize as plain strings
("accept", "time", "short").
"""

from enum import Enum


class Decision(str, Enum):
    """
    Accept/reject verdict for a single fare check.

    - accept: Offer is at or above the minimum fare (equality accepts)
    - reject: Offer is below the minimum fare
    """
    ACCEPT = "accept"
    REJECT = "reject"


class BindingConstraint(str, Enum):
    """
    Which check produced the governing (larger) minimum fare.

    Ties go to TIME.
    """
    TIME = "time"
    MILES = "miles"


class RideCategory(str, Enum):
    """
    Ride-duration buckets of the estimator's ride mix.

    - short: under 10 minutes
    - medium: 10 to 20 minutes
    - long: 20 minutes or more
    """
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class CoverageSegment(str, Enum):
    """
    Labels for the two-part offer coverage breakdown.

    An offer that covers the requirement splits into REQUIRED + OVER;
    one that does not splits into COVERED + SHORTFALL.
    """
    REQUIRED = "Required"
    OVER = "Over"
    COVERED = "Covered"
    SHORTFALL = "Shortfall"
