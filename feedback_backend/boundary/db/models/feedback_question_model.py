"""
Feedback question ORM model.

Dependencies: sqlalchemy, feedback_backend.boundary.db.base
System role: Feedback question persistence
"""

from sqlalchemy import ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from feedback_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class FeedbackQuestionModel(Base, UUIDMixin, TimestampMixin):
    """
    Feedback question belonging to a (session name, course) pair.

    question_details holds the JSON form of a tagged question-details
    payload (see feedback_backend.core.question_details).

    Attributes:
        course_id: Owning course
        feedback_session_name: Owning session name
        question_number: 1-based position within the session
        giver_type / recipient_type: Participant types
        number_of_entities_to_give_feedback_to: Cap per giver (-100 = unlimited)
        show_responses_to / show_giver_name_to / show_recipient_name_to: Visibility lists
        question_details: Tagged question payload
        question_description: Optional description
    """

    __tablename__ = "feedback_questions"

    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    feedback_session_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    question_number: Mapped[int] = mapped_column(Integer, nullable=False)
    giver_type: Mapped[str] = mapped_column(String(64), nullable=False)
    recipient_type: Mapped[str] = mapped_column(String(64), nullable=False)
    number_of_entities_to_give_feedback_to: Mapped[int] = mapped_column(
        Integer, nullable=False, default=-100
    )
    show_responses_to: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    show_giver_name_to: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    show_recipient_name_to: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    question_details: Mapped[dict] = mapped_column(JSON, nullable=False)
    question_description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
