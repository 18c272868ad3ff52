"""
Feedback sessions router package.

Exports the router for feedback session endpoints.
"""

from .feedback_sessions_router import router

__all__ = ["router"]
