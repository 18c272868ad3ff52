"""
Student CRUD operations.

Dependencies: sqlalchemy, feedback_backend.boundary.db.models
System role: Student persistence and participant counting
"""

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.models.student_model import StudentModel
from feedback_backend.boundary.db.CRUD.base_crud import BaseCRUD


class StudentCRUD(BaseCRUD[StudentModel]):
    """CRUD operations for StudentModel with course-scoped counts."""

    def __init__(self) -> None:
        """Initialize StudentCRUD with StudentModel."""
        super().__init__(StudentModel)

    async def count_by_course_id(self, session: AsyncSession, course_id: str) -> int:
        """Count students enrolled in a course."""
        stmt = select(func.count()).select_from(StudentModel).where(
            StudentModel.course_id == course_id
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def count_teams_by_course_id(self, session: AsyncSession, course_id: str) -> int:
        """Count distinct team names in a course."""
        stmt = select(func.count(distinct(StudentModel.team_name))).where(
            StudentModel.course_id == course_id
        )
        result = await session.execute(stmt)
        return result.scalar_one()


student_crud = StudentCRUD()
