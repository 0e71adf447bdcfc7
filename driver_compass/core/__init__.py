"""
Core infrastructure package for the Driver Compass backend.

Provides:
- Configuration management via pydantic-settings
- Numeric coercion helpers used by every calculator
- FastAPI dependency injection utilities

This module re-exports key components from submodules so that other modules
can use simplified imports like:

    from driver_compass.core import get_settings, coerce_number, SettingsDep
"""

# =============================================================================
# Re-exports from driver_compass.core.config
# =============================================================================
from driver_compass.core.config import Settings, get_settings

# =============================================================================
# Re-exports from driver_compass.core.numeric
# =============================================================================
from driver_compass.core.numeric import (
    ceil_to_cents,
    clamp,
    coerce_number,
    safe_divide,
)

# =============================================================================
# Re-exports from driver_compass.core.dependencies
# =============================================================================
from driver_compass.core.dependencies import (
    get_settings_dependency,
    SettingsDep,
)

__all__ = [
    # Configuration management (from config.py)
    'Settings',
    'get_settings',
    # Numeric helpers (from numeric.py)
    'ceil_to_cents',
    'clamp',
    'coerce_number',
    'safe_divide',
    # FastAPI dependency injection (from dependencies.py)
    'get_settings_dependency',
    'SettingsDep',
]
