"""
Feedback question CRUD operations.

Dependencies: sqlalchemy, feedback_backend.boundary.db.models
System role: Feedback question persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.models.feedback_question_model import FeedbackQuestionModel
from feedback_backend.boundary.db.CRUD.base_crud import BaseCRUD


class FeedbackQuestionCRUD(BaseCRUD[FeedbackQuestionModel]):
    """CRUD operations for FeedbackQuestionModel scoped to a session."""

    def __init__(self) -> None:
        """Initialize FeedbackQuestionCRUD with FeedbackQuestionModel."""
        super().__init__(FeedbackQuestionModel)

    async def get_for_session(
        self,
        session: AsyncSession,
        feedback_session_name: str,
        course_id: str,
    ) -> Sequence[FeedbackQuestionModel]:
        """
        Retrieve the questions of a session ordered by question number.

        Args:
            session: Async database session
            feedback_session_name: Session name
            course_id: Course identifier

        Returns:
            Sequence of FeedbackQuestionModels, ascending question_number
        """
        stmt = (
            select(FeedbackQuestionModel)
            .where(
                FeedbackQuestionModel.feedback_session_name == feedback_session_name,
                FeedbackQuestionModel.course_id == course_id,
            )
            .order_by(FeedbackQuestionModel.question_number)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


feedback_question_crud = FeedbackQuestionCRUD()
