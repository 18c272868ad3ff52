"""Service orchestrators."""

from .access_gate import AccessGate
from .course_service import CourseService
from .feedback_question_service import FeedbackQuestionService
from .feedback_session_service import FeedbackSessionService
from .instructor_service import InstructorService
from .session_creator import (
    CreatedFeedbackSession,
    QuestionCopyOutcome,
    QuestionCopyReport,
    SessionCreator,
)

__all__ = [
    "AccessGate",
    "CourseService",
    "CreatedFeedbackSession",
    "FeedbackQuestionService",
    "FeedbackSessionService",
    "InstructorService",
    "QuestionCopyOutcome",
    "QuestionCopyReport",
    "SessionCreator",
]
