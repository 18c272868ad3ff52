"""
Database models package.

Exports:
  - CourseModel: Course ORM model
  - InstructorModel: Course-scoped instructor with privileges
  - StudentModel: Course participant
  - FeedbackSessionModel: Feedback session
  - FeedbackQuestionModel: Feedback question

Dependencies: sqlalchemy, feedback_backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from feedback_backend.boundary.db.models.course_model import CourseModel
from feedback_backend.boundary.db.models.instructor_model import InstructorModel
from feedback_backend.boundary.db.models.student_model import StudentModel
from feedback_backend.boundary.db.models.feedback_session_model import FeedbackSessionModel
from feedback_backend.boundary.db.models.feedback_question_model import FeedbackQuestionModel

__all__ = [
    "CourseModel",
    "InstructorModel",
    "StudentModel",
    "FeedbackSessionModel",
    "FeedbackQuestionModel",
]
