"""
Feedback session creation workflow.

Builds and persists a feedback session, optionally clones the questions of
the same-named session in another course, then re-reads the stored session
and attaches the caller's privileges.

Each mutation is committed on its own. A failure while copying questions
leaves the session and every question copied before it in place; the
returned error carries a per-question report so callers can retry the copy.

Dependencies: feedback_backend.application.services, feedback_backend.core
System role: Feedback session creation use case
"""

import logging
from dataclasses import dataclass, field

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.application.services.feedback_question_service import FeedbackQuestionService
from feedback_backend.application.services.feedback_session_service import FeedbackSessionService
from feedback_backend.boundary.db.models.course_model import CourseModel
from feedback_backend.boundary.db.models.feedback_session_model import FeedbackSessionModel
from feedback_backend.boundary.db.models.instructor_model import InstructorModel
from feedback_backend.configs.feedback import FeedbackSessionSettings
from feedback_backend.core.entities import FeedbackQuestionAttributes, FeedbackSessionAttributes
from feedback_backend.core.exceptions import (
    EntityAlreadyExistsError,
    EntityDoesNotExistError,
    InvalidHttpRequestBodyError,
    InvalidParametersError,
    QuestionCopyError,
)
from feedback_backend.core.gatekeeper import privileges_of
from feedback_backend.core.question_details import QuestionType
from feedback_backend.core.sanitization import sanitize_title
from feedback_backend.models.feedback_session import FeedbackSessionCreateRequest

logger = logging.getLogger(__name__)


@dataclass
class QuestionCopyOutcome:
    """Result of copying one source question."""

    question_number: int
    copied: bool
    error: str | None = None


@dataclass
class QuestionCopyReport:
    """Per-question results of one copy run, in processing order."""

    source_course_id: str
    destination_course_id: str
    feedback_session_name: str
    outcomes: list[QuestionCopyOutcome] = field(default_factory=list)

    @property
    def copied_question_numbers(self) -> list[int]:
        return [o.question_number for o in self.outcomes if o.copied]

    @property
    def failed_question_number(self) -> int | None:
        for outcome in self.outcomes:
            if not outcome.copied:
                return outcome.question_number
        return None


@dataclass
class CreatedFeedbackSession:
    """Canonical stored session plus the creator's privileges on it."""

    feedback_session: FeedbackSessionModel
    privileges: dict[str, bool]
    copy_report: QuestionCopyReport | None = None


class SessionCreator:
    """Feedback session creation orchestrator."""

    def __init__(self, db: AsyncSession, settings: FeedbackSessionSettings | None = None) -> None:
        """
        Initialize the creator with async database session.

        Args:
            db: Async SQLAlchemy session
            settings: Session rule settings
        """
        self.db = db
        self.sessions = FeedbackSessionService(db, settings)
        self.questions = FeedbackQuestionService(db)

    async def create(
        self,
        course_id: str,
        instructor: InstructorModel,
        course: CourseModel,
        request: FeedbackSessionCreateRequest,
    ) -> CreatedFeedbackSession:
        """
        Create a feedback session and optionally copy questions into it.

        Args:
            course_id: Course the session is created in
            instructor: Authorized instructor (creator-of-record)
            course: Resolved course (time zone source)
            request: Validated creation request

        Returns:
            CreatedFeedbackSession: Stored session, privileges and copy report

        Raises:
            InvalidHttpRequestBodyError: Duplicate session or invalid values
            QuestionCopyError: A question could not be copied
            EntityDoesNotExistError: The session vanished after creation
        """
        feedback_session_name = sanitize_title(request.feedback_session_name)

        attributes = FeedbackSessionAttributes(
            name=feedback_session_name,
            course_id=course_id,
            creator_email=instructor.email,
            time_zone=course.time_zone,
            instructions=request.instructions,
            start_time=request.submission_start_time,
            end_time=request.submission_end_time,
            grace_period_minutes=request.grace_period,
            session_visible_from_time=request.session_visible_from_time,
            results_visible_from_time=request.results_visible_from_time,
            is_closing_email_enabled=request.is_closing_email_enabled,
            is_published_email_enabled=request.is_published_email_enabled,
        )

        try:
            await self.sessions.create_feedback_session(attributes)
        except (EntityAlreadyExistsError, InvalidParametersError) as e:
            logger.info(
                "Feedback session rejected",
                extra={"course_id": course_id, "feedback_session_name": feedback_session_name, "error": str(e)},
            )
            raise InvalidHttpRequestBodyError(e.message, e.details) from e
        await self.db.commit()

        copy_report = None
        if request.to_copy_course_id is not None:
            # Source questions are looked up under the name as the caller typed it
            copy_report = await self.copy_questions(
                source_course_id=request.to_copy_course_id,
                destination_course_id=course_id,
                source_session_name=request.feedback_session_name,
                destination_session_name=feedback_session_name,
            )

        feedback_session = await self._get_non_null_feedback_session(feedback_session_name, course_id)
        privileges = privileges_of(instructor).for_session(feedback_session_name)

        return CreatedFeedbackSession(
            feedback_session=feedback_session,
            privileges=privileges,
            copy_report=copy_report,
        )

    async def copy_questions(
        self,
        source_course_id: str,
        destination_course_id: str,
        source_session_name: str,
        destination_session_name: str,
    ) -> QuestionCopyReport:
        """
        Clone the questions of a source session into the destination session.

        Questions are processed one at a time in ascending question number.
        MSQ questions get their generated-choice count recomputed against the
        destination course before they are stored.

        Args:
            source_course_id: Course holding the source session
            destination_course_id: Course of the new session
            source_session_name: Name of the source session
            destination_session_name: Name of the new session

        Returns:
            QuestionCopyReport: One outcome per copied question

        Raises:
            QuestionCopyError: On the first question that cannot be stored;
                earlier questions stay persisted, later ones are not attempted
        """
        report = QuestionCopyReport(
            source_course_id=source_course_id,
            destination_course_id=destination_course_id,
            feedback_session_name=destination_session_name,
        )
        source_questions = await self.questions.get_feedback_questions_for_session(
            source_session_name, source_course_id
        )

        for question in source_questions:
            question_number = question.question_number
            try:
                attributes = await self._build_copy_attributes(
                    question, destination_course_id, destination_session_name
                )
                await self.questions.create_feedback_question(attributes)
            except (InvalidParametersError, ValidationError, ValueError) as e:
                if isinstance(e, InvalidParametersError):
                    error = e.message
                else:
                    error = f"Question {question_number} could not be copied: {e}"
                report.outcomes.append(
                    QuestionCopyOutcome(question_number=question_number, copied=False, error=error)
                )
                logger.warning(
                    "Question copy stopped",
                    extra={
                        "source_course_id": source_course_id,
                        "course_id": destination_course_id,
                        "feedback_session_name": destination_session_name,
                        "question_number": question_number,
                        "copied_question_numbers": report.copied_question_numbers,
                        "error": error,
                    },
                )
                raise QuestionCopyError(error, report) from e

            await self.db.commit()
            report.outcomes.append(QuestionCopyOutcome(question_number=question_number, copied=True))

        logger.info(
            "Questions copied",
            extra={
                "source_course_id": source_course_id,
                "course_id": destination_course_id,
                "feedback_session_name": destination_session_name,
                "count": len(report.outcomes),
            },
        )
        return report

    async def _build_copy_attributes(
        self,
        question,
        destination_course_id: str,
        destination_session_name: str,
    ) -> FeedbackQuestionAttributes:
        """
        Rebuild a stored question for the destination session.

        Raises:
            ValidationError: Stored details are not a known question type
            ValueError: Stored participant type is unknown
        """
        attributes = FeedbackQuestionAttributes.from_model(question)
        attributes.course_id = destination_course_id
        attributes.feedback_session_name = destination_session_name

        details = attributes.question_details
        if details.question_type == QuestionType.MSQ:
            details.num_of_generated_msq_choices = (
                await self.questions.get_num_of_generated_choices_for_participant_type(
                    destination_course_id, details.generate_options_for
                )
            )
        return attributes

    async def _get_non_null_feedback_session(self, name: str, course_id: str) -> FeedbackSessionModel:
        feedback_session = await self.sessions.get_feedback_session(name, course_id)
        if feedback_session is None:
            raise EntityDoesNotExistError("Feedback session", f"{name} in course {course_id}")
        return feedback_session
