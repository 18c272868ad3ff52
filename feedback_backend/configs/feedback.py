"""
Feedback session rule settings.

Limits applied when feedback sessions are created.

Dependencies: pydantic, pydantic_settings
System role: Domain rule configuration for session creation
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedbackSessionSettings(BaseSettings):
    """Settings governing feedback session creation."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDBACK_",
        case_sensitive=False,
        extra="ignore",
    )

    session_name_max_length: int = Field(
        default=64,
        description="Maximum length of a sanitized feedback session name",
    )
