"""API routers."""

from .feedback_sessions import router as feedback_sessions_router
from .health import router as health_router

__all__ = [
    "feedback_sessions_router",
    "health_router",
]
