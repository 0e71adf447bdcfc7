"""
Driver Compass Backend Package.

Decision-support calculators for rideshare drivers, served through FastAPI.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration, numeric helpers, and dependencies
    - models: Pydantic schemas and enums
    - services: The threshold, planner and estimator calculators
"""

__version__ = "1.0.0"
