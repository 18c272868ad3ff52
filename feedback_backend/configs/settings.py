"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from feedback_backend.configs.base import BaseSettings
from feedback_backend.configs.database import DatabaseSettings
from feedback_backend.configs.feedback import FeedbackSessionSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    feedback: FeedbackSessionSettings = FeedbackSessionSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from feedback_backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
