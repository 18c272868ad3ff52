"""
Feedback session CRUD operations.

Dependencies: sqlalchemy, feedback_backend.boundary.db.models
System role: Feedback session persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.models.feedback_session_model import FeedbackSessionModel
from feedback_backend.boundary.db.CRUD.base_crud import BaseCRUD


class FeedbackSessionCRUD(BaseCRUD[FeedbackSessionModel]):
    """
    CRUD operations for FeedbackSessionModel.

    Adds lookups by the natural key (name, course_id).
    """

    def __init__(self) -> None:
        """Initialize FeedbackSessionCRUD with FeedbackSessionModel."""
        super().__init__(FeedbackSessionModel)

    async def get_by_name_and_course(
        self,
        session: AsyncSession,
        name: str,
        course_id: str,
    ) -> FeedbackSessionModel | None:
        """
        Retrieve a feedback session by its natural key.

        Args:
            session: Async database session
            name: Exact session name
            course_id: Course identifier

        Returns:
            FeedbackSessionModel if found, None otherwise
        """
        stmt = select(FeedbackSessionModel).where(
            FeedbackSessionModel.name == name,
            FeedbackSessionModel.course_id == course_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


feedback_session_crud = FeedbackSessionCRUD()
