"""
Student ORM model.

Dependencies: sqlalchemy, feedback_backend.boundary.db.base
System role: Course participant persistence
"""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from feedback_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class StudentModel(Base, UUIDMixin, TimestampMixin):
    """
    Student enrolled in a course.

    Attributes:
        course_id: Course the student is enrolled in
        email: Student email (unique per course)
        name: Display name
        team_name: Team within the course
        section_name: Section within the course
    """

    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("course_id", "email", name="uq_student_course_email"),
    )

    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    team_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    section_name: Mapped[str] = mapped_column(String(255), nullable=False, default="None")

    course = relationship("CourseModel", back_populates="students")
