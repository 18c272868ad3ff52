"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: feedback_backend.configs, feedback_backend.application, feedback_backend.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.configs import Settings, get_settings
from feedback_backend.boundary.db import get_async_db
from feedback_backend.application.services import (
    AccessGate,
    FeedbackQuestionService,
    FeedbackSessionService,
    SessionCreator,
)


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_current_principal(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> str:
    """
    Resolve the authenticated principal of the request.

    The login identity is set by the authenticating proxy in front of the
    service.

    Args:
        x_user_id: Value of the X-User-Id header

    Returns:
        str: Principal identifier

    Raises:
        HTTPException(401): If no principal is present
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login is required to access this resource",
        )
    return x_user_id.strip()


def get_access_gate(db: AsyncSession = Depends(get_async_db)) -> AccessGate:
    """
    Get access gate instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        AccessGate: Access gate bound to the request session
    """
    return AccessGate(db=db)


def get_session_creator(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> SessionCreator:
    """
    Get feedback session creation workflow.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        SessionCreator: Creator bound to the request session
    """
    return SessionCreator(db=db, settings=settings.feedback)


def get_feedback_session_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> FeedbackSessionService:
    """
    Get feedback session service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        FeedbackSessionService: Feedback session service instance
    """
    return FeedbackSessionService(db=db, settings=settings.feedback)


def get_feedback_question_service(db: AsyncSession = Depends(get_async_db)) -> FeedbackQuestionService:
    """
    Get feedback question service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        FeedbackQuestionService: Feedback question service instance
    """
    return FeedbackQuestionService(db=db)
