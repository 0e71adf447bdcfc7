"""
Driver Compass API package initialization.

This package contains FastAPI router modules for the three calculators:
- threshold: On-the-road accept/reject check and quick reference
- planner: Monthly goal planner
- estimator: Monthly earnings estimator
"""

from fastapi import APIRouter

# Import router modules
from driver_compass.api.threshold import router as threshold_router
from driver_compass.api.planner import router as planner_router
from driver_compass.api.estimator import router as estimator_router

# Create main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(threshold_router, prefix="/threshold", tags=["threshold"])
api_router.include_router(planner_router, prefix="/planner", tags=["planner"])
api_router.include_router(estimator_router, prefix="/estimator", tags=["estimator"])

# Export all routers for selective imports
__all__ = [
    "api_router",
    "threshold_router",
    "planner_router",
    "estimator_router",
]
