"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_access_gate,
    get_current_principal,
    get_feedback_question_service,
    get_feedback_session_service,
    get_session_creator,
    get_settings_dependency,
)

__all__ = [
    "get_access_gate",
    "get_current_principal",
    "get_feedback_question_service",
    "get_feedback_session_service",
    "get_session_creator",
    "get_settings_dependency",
]
