"""
Instructor service.

Dependencies: feedback_backend.boundary.db.CRUD
System role: Instructor lookup by login identity
"""

from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.CRUD.instructor_crud import instructor_crud
from feedback_backend.boundary.db.models.instructor_model import InstructorModel


class InstructorService:
    """Instructor lookups."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_instructor_for_principal(
        self,
        course_id: str,
        principal_id: str,
    ) -> InstructorModel | None:
        """
        Get the instructor record a principal holds in a course.

        Args:
            course_id: Course identifier
            principal_id: Login identity of the caller

        Returns:
            InstructorModel if the principal instructs the course, None otherwise
        """
        return await instructor_crud.get_by_course_and_principal(self.db, course_id, principal_id)
