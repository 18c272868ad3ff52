"""
Settings shared by every configuration section of the feedback service.

Values come from environment variables, falling back to a local ``.env``.

Dependencies: pydantic_settings
System role: Common parent of the service's settings classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Deployment-wide settings inherited by the service's config sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment the feedback service runs in; logged at startup",
    )
    log_level: str = Field(
        default="INFO",
        description="Root level for the service's stdout log handler",
    )
