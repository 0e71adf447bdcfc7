"""
FastAPI dependency injection module for the Driver Compass backend.

Routers receive the cached Settings through these dependencies instead of
calling get_settings() directly, so tests can override configuration with
``app.dependency_overrides[get_settings_dependency]``.

Usage:
    @router.get("/threshold/defaults")
    async def threshold_defaults(settings: SettingsDep) -> ThresholdInput:
        ...
"""

from typing import Annotated

from fastapi import Depends

from driver_compass.core.config import Settings, get_settings


# =============================================================================
# Settings Dependency
# =============================================================================

def get_settings_dependency() -> Settings:
    """
    Return the application settings for FastAPI dependency injection.

    Returns:
        Settings: The cached application settings instance.
    """
    return get_settings()


# Type alias for injecting settings into endpoint handlers
SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]
