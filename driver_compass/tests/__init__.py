'''
Driver Compass Test Suite

Test Modules:
-------------
- test_numeric.py: Coercion, clamping, cent rounding, guarded division
- test_threshold.py: Minimum fares, binding constraint, accept/reject boundary,
  offer coverage, quick reference
- test_planner.py: Day-count sanitizing, daily target and hourly rates,
  per-ride bracket table, finiteness under bad input
- test_estimator.py: Active minutes, floor and blended projections,
  template blended rate
- test_formatting.py: Currency/number display strings
- test_api.py: FastAPI endpoints and default merging

Running Tests:
--------------
    pip install -e ".[test]"
    pytest driver_compass/tests/ -v
'''

__all__ = []
