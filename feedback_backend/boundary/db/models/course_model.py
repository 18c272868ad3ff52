"""
Course ORM model.

Represents a course owning instructors, students and feedback sessions.

Dependencies: sqlalchemy, feedback_backend.boundary.db.base
System role: Course persistence
"""

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from feedback_backend.boundary.db.base import Base, TimestampMixin, UTCDateTime


class CourseModel(Base, TimestampMixin):
    """
    Course ORM model.

    Courses are identified by a human-chosen string id (e.g. "CS101").
    The time zone is copied onto every feedback session created in the course.

    Attributes:
        id: Course identifier (primary key)
        name: Course name
        time_zone: IANA time zone name
        deleted_at: Soft-delete timestamp, None while active
    """

    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Course name"
    )

    time_zone: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        default="UTC",
        doc="IANA time zone of the course"
    )

    deleted_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(),
        nullable=True,
        default=None,
        doc="Soft-delete timestamp"
    )

    # Relationships
    instructors = relationship("InstructorModel", back_populates="course")
    students = relationship("StudentModel", back_populates="course")
    feedback_sessions = relationship("FeedbackSessionModel", back_populates="course")
