"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from feedback_backend.boundary.db.CRUD import feedback_session_crud

    fs = await feedback_session_crud.get_by_name_and_course(db, "Midterm", "CS101")
"""

from feedback_backend.boundary.db.CRUD.base_crud import BaseCRUD
from feedback_backend.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from feedback_backend.boundary.db.CRUD.instructor_crud import InstructorCRUD, instructor_crud
from feedback_backend.boundary.db.CRUD.student_crud import StudentCRUD, student_crud
from feedback_backend.boundary.db.CRUD.feedback_session_crud import (
    FeedbackSessionCRUD,
    feedback_session_crud,
)
from feedback_backend.boundary.db.CRUD.feedback_question_crud import (
    FeedbackQuestionCRUD,
    feedback_question_crud,
)

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "course_crud",
    "InstructorCRUD",
    "instructor_crud",
    "StudentCRUD",
    "student_crud",
    "FeedbackSessionCRUD",
    "feedback_session_crud",
    "FeedbackQuestionCRUD",
    "feedback_question_crud",
]
