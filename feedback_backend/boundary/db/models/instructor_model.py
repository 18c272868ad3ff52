"""
Instructor ORM model.

Dependencies: sqlalchemy, feedback_backend.boundary.db.base
System role: Instructor persistence with role and privilege document
"""

from sqlalchemy import ForeignKey, JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from feedback_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class InstructorModel(Base, UUIDMixin, TimestampMixin):
    """
    Instructor of a single course.

    An instructor record is scoped to one course; the same person teaching
    two courses has two records sharing a principal_id.

    Attributes:
        course_id: Course the instructor belongs to
        principal_id: Login identity of the instructor
        name: Display name
        email: Contact email, used as creator-of-record
        role: Role name (Co-owner, Manager, Observer, Tutor, Custom)
        privileges: {"course_level": {...}, "session_level": {name: {...}}}
    """

    __tablename__ = "instructors"
    __table_args__ = (
        UniqueConstraint("course_id", "principal_id", name="uq_instructor_course_principal"),
        UniqueConstraint("course_id", "email", name="uq_instructor_course_email"),
    )

    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    principal_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="Co-owner")
    privileges: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Custom privilege flags and per-session overrides",
    )

    course = relationship("CourseModel", back_populates="instructors")
