"""
Settings and environment management module for the Driver Compass backend.

This module provides centralized configuration management using pydantic-settings,
which automatically loads settings from environment variables and .env files.

Key Features:
- Environment variable validation and type coercion
- Sensible defaults for development
- Singleton pattern via @lru_cache for efficient access
- Default calculator inputs used when a request omits a field

Environment Variables:
- APP_NAME: Name reported by the root endpoint (default: Driver Compass API)
- LOG_LEVEL: Root logging level (default: INFO)
- CORS_ORIGINS: JSON list of allowed browser origins

Calculator Defaults:
- default_per_min_floor: 0.60 ($ per active minute)
- default_dpm_floor: 1.70 ($ per mile)
- default_earnings_goal: 1600 (monthly goal, $)
- default_days_in_month: 30
- default_hours_per_day: 6
- default_idle_percent: 30
- default_estimator_hours_per_day: 6
- default_estimator_days_per_month: 25

Usage:
    from driver_compass.core.config import get_settings

    settings = get_settings()
    per_min_floor = settings.default_per_min_floor
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The calculators themselves take every value as an explicit input; the
    defaults here only fill in fields a request leaves out, mirroring the
    starting values a driver sees before editing anything.

    Attributes:
        app_name: Name reported by the root endpoint.
        log_level: Root logging level name.
        cors_origins: Browser origins allowed by the CORS middleware.
        default_per_min_floor: Default minimum $ per active minute.
        default_dpm_floor: Default minimum $ per mile.
        default_minutes: Default trip minutes for the threshold calculator.
        default_miles: Default trip miles for the threshold calculator.
        default_offer: Default offer amount for the threshold calculator.
        default_earnings_goal: Default monthly earnings goal for the planner.
        default_days_in_month: Default days worked per month for the planner.
        default_hours_per_day: Default on-app hours per day for the planner.
        default_idle_percent: Default share of on-app time without a ride.
        default_estimator_hours_per_day: Default hours per day for the estimator.
        default_estimator_days_per_month: Default days per month for the estimator.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',  # Ignore extra environment variables not defined in this class
        case_sensitive=False,  # Allow LOG_LEVEL or log_level
    )

    # =========================================================================
    # Service Settings
    # =========================================================================

    app_name: str = 'Driver Compass API'

    log_level: str = 'INFO'

    cors_origins: List[str] = [
        'http://localhost:3000',
        'http://127.0.0.1:3000',
    ]

    # =========================================================================
    # Threshold Calculator Defaults
    # Conservative floors: $0.60 per active minute, $1.70 per mile
    # =========================================================================

    default_per_min_floor: float = 0.60

    default_dpm_floor: float = 1.70

    default_minutes: float = 12

    default_miles: float = 5

    default_offer: float = 10

    # =========================================================================
    # Planner Calculator Defaults
    # =========================================================================

    default_earnings_goal: float = 1600

    # Days doing rides in the month, not calendar days
    default_days_in_month: float = 30

    default_hours_per_day: float = 6

    # Percent of on-app time spent waiting without a ride
    default_idle_percent: float = 30

    # =========================================================================
    # Estimator Calculator Defaults
    # =========================================================================

    default_estimator_hours_per_day: float = 6

    default_estimator_days_per_month: float = 25


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings: The cached settings instance.

    Note:
        To refresh settings in tests, clear the cache:
        >>> get_settings.cache_clear()
    """
    return Settings()
