"""
Course service.

Read access to courses for the feedback session workflow.

Dependencies: feedback_backend.boundary.db.CRUD
System role: Course lookup
"""

from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.CRUD.course_crud import course_crud
from feedback_backend.boundary.db.models.course_model import CourseModel


class CourseService:
    """Course lookups."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def get_course(self, course_id: str) -> CourseModel | None:
        """
        Get course by identifier.

        Args:
            course_id: Course identifier

        Returns:
            CourseModel if found, None otherwise
        """
        return await course_crud.get_by_id(self.db, course_id)
