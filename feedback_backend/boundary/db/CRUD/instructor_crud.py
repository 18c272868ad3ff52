"""
Instructor CRUD operations.

Dependencies: sqlalchemy, feedback_backend.boundary.db.models
System role: Instructor persistence operations
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.models.instructor_model import InstructorModel
from feedback_backend.boundary.db.CRUD.base_crud import BaseCRUD


class InstructorCRUD(BaseCRUD[InstructorModel]):
    """
    CRUD operations for InstructorModel.

    Adds lookups scoped to a course.
    """

    def __init__(self) -> None:
        """Initialize InstructorCRUD with InstructorModel."""
        super().__init__(InstructorModel)

    async def get_by_course_and_principal(
        self,
        session: AsyncSession,
        course_id: str,
        principal_id: str,
    ) -> InstructorModel | None:
        """
        Retrieve the instructor record of a principal in a course.

        Args:
            session: Async database session
            course_id: Course identifier
            principal_id: Login identity

        Returns:
            InstructorModel if the principal instructs the course, None otherwise
        """
        stmt = select(InstructorModel).where(
            InstructorModel.course_id == course_id,
            InstructorModel.principal_id == principal_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_course_id(self, session: AsyncSession, course_id: str) -> int:
        """Count instructors of a course."""
        stmt = select(func.count()).select_from(InstructorModel).where(
            InstructorModel.course_id == course_id
        )
        result = await session.execute(stmt)
        return result.scalar_one()


instructor_crud = InstructorCRUD()
