"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, UTCDateTime: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - CourseModel, InstructorModel, StudentModel, FeedbackSessionModel, FeedbackQuestionModel
  - course_crud, instructor_crud, student_crud, feedback_session_crud, feedback_question_crud

Dependencies: sqlalchemy, feedback_backend.configs
System role: Database adapter for courses, instructors, students, sessions and questions
"""

from feedback_backend.boundary.db.base import Base, TimestampMixin, UTCDateTime, UUIDMixin
from feedback_backend.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from feedback_backend.boundary.db.models import (
    CourseModel,
    FeedbackQuestionModel,
    FeedbackSessionModel,
    InstructorModel,
    StudentModel,
)
from feedback_backend.boundary.db.CRUD import (
    course_crud,
    feedback_question_crud,
    feedback_session_crud,
    instructor_crud,
    student_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UTCDateTime",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CourseModel",
    "InstructorModel",
    "StudentModel",
    "FeedbackSessionModel",
    "FeedbackQuestionModel",
    # CRUD singletons
    "course_crud",
    "instructor_crud",
    "student_crud",
    "feedback_session_crud",
    "feedback_question_crud",
]
