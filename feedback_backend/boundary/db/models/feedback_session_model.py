"""
Feedback session ORM model.

Represents a time-boxed feedback collection exercise within a course.

Dependencies: sqlalchemy, feedback_backend.boundary.db.base
System role: Feedback session persistence
"""

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from feedback_backend.boundary.db.base import Base, TimestampMixin, UTCDateTime, UUIDMixin


class FeedbackSessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Feedback session ORM model.

    A session is identified by (name, course_id); the unique constraint is
    the source of truth for duplicate detection under concurrent creation.
    The time zone is copied from the course when the session is created.

    Attributes:
        name: Sanitized session name
        course_id: Owning course
        creator_email: Email of the creating instructor
        instructions: Instructions shown to participants
        start_time / end_time: Submission window (UTC)
        grace_period_minutes: Extra minutes accepted after end_time
        session_visible_from_time: When participants can see the session
        results_visible_from_time: When responses are published
        time_zone: IANA time zone inherited from the course
        is_closing_email_enabled: Send closing reminder emails
        is_published_email_enabled: Send results-published emails
    """

    __tablename__ = "feedback_sessions"
    __table_args__ = (
        UniqueConstraint("name", "course_id", name="uq_feedback_session_name_course"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    creator_email: Mapped[str] = mapped_column(String(255), nullable=False)
    instructions: Mapped[str] = mapped_column(Text, nullable=False, default="")
    start_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    end_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    grace_period_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    session_visible_from_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    results_visible_from_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    time_zone: Mapped[str] = mapped_column(String(64), nullable=False)
    is_closing_email_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_published_email_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    course = relationship("CourseModel", back_populates="feedback_sessions")
