"""
Feedback question service.

Validates and persists feedback questions, lists a session's questions and
counts the participants an MSQ question generates its options from.

Dependencies: feedback_backend.boundary.db.CRUD, feedback_backend.core
System role: Feedback question persistence rules
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.CRUD.feedback_question_crud import feedback_question_crud
from feedback_backend.boundary.db.CRUD.feedback_session_crud import feedback_session_crud
from feedback_backend.boundary.db.CRUD.instructor_crud import instructor_crud
from feedback_backend.boundary.db.CRUD.student_crud import student_crud
from feedback_backend.boundary.db.models.feedback_question_model import FeedbackQuestionModel
from feedback_backend.core.entities import FeedbackQuestionAttributes
from feedback_backend.core.exceptions import InvalidParametersError
from feedback_backend.core.question_details import (
    MAX_POSSIBLE_RECIPIENTS,
    VALID_GIVER_TYPES,
    VALID_RECIPIENT_TYPES,
    VALID_VISIBILITY_TYPES,
    FeedbackParticipantType,
    dump_question_details,
)

logger = logging.getLogger(__name__)


class FeedbackQuestionService:
    """Feedback question persistence with domain validation."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize feedback question service.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def get_feedback_questions_for_session(
        self,
        feedback_session_name: str,
        course_id: str,
    ) -> list[FeedbackQuestionModel]:
        """
        List a session's questions in ascending question number.

        Args:
            feedback_session_name: Session name
            course_id: Course identifier

        Returns:
            list[FeedbackQuestionModel]: Possibly empty list
        """
        questions = await feedback_question_crud.get_for_session(
            self.db, feedback_session_name, course_id
        )
        return list(questions)

    async def get_num_of_generated_choices_for_participant_type(
        self,
        course_id: str,
        generate_options_for: FeedbackParticipantType,
    ) -> int:
        """
        Count the options an MSQ question generates in a course.

        Args:
            course_id: Course whose participants are counted
            generate_options_for: Participant category the options come from

        Returns:
            int: Number of generated options (0 for categories that generate none)
        """
        if generate_options_for == FeedbackParticipantType.STUDENTS:
            return await student_crud.count_by_course_id(self.db, course_id)
        if generate_options_for == FeedbackParticipantType.STUDENTS_EXCLUDING_SELF:
            return max(await student_crud.count_by_course_id(self.db, course_id) - 1, 0)
        if generate_options_for == FeedbackParticipantType.TEAMS:
            return await student_crud.count_teams_by_course_id(self.db, course_id)
        if generate_options_for == FeedbackParticipantType.TEAMS_EXCLUDING_SELF:
            return max(await student_crud.count_teams_by_course_id(self.db, course_id) - 1, 0)
        if generate_options_for == FeedbackParticipantType.INSTRUCTORS:
            return await instructor_crud.count_by_course_id(self.db, course_id)
        return 0

    def _get_structural_errors(self, attributes: FeedbackQuestionAttributes) -> list[str]:
        errors = []
        if attributes.giver_type not in VALID_GIVER_TYPES:
            errors.append(f"{attributes.giver_type.value} is not a valid feedback giver")
        if attributes.recipient_type not in VALID_RECIPIENT_TYPES:
            errors.append(f"{attributes.recipient_type.value} is not a valid feedback recipient")

        cap = attributes.number_of_entities_to_give_feedback_to
        if cap != MAX_POSSIBLE_RECIPIENTS and cap < 1:
            errors.append("Number of entities to give feedback to must be at least 1")

        for label, visibility in (
            ("show responses to", attributes.show_responses_to),
            ("show giver name to", attributes.show_giver_name_to),
            ("show recipient name to", attributes.show_recipient_name_to),
        ):
            for participant in visibility:
                if participant not in VALID_VISIBILITY_TYPES:
                    errors.append(f"{participant.value} is not a valid entry for {label}")

        errors.extend(attributes.question_details.validation_errors())
        return errors

    async def create_feedback_question(
        self,
        attributes: FeedbackQuestionAttributes,
    ) -> FeedbackQuestionModel:
        """
        Persist a new feedback question.

        Question numbers within a session must stay unique and contiguous:
        the new number must be unused and at most one past the current count.

        Args:
            attributes: Question values

        Returns:
            FeedbackQuestionModel: Created (flushed, uncommitted) question

        Raises:
            InvalidParametersError: If the session is missing or any rule is violated
        """
        context = {
            "course_id": attributes.course_id,
            "feedback_session_name": attributes.feedback_session_name,
            "question_number": attributes.question_number,
        }

        session = await feedback_session_crud.get_by_name_and_course(
            self.db, attributes.feedback_session_name, attributes.course_id
        )
        if session is None:
            raise InvalidParametersError(
                f"Trying to create a question for a non-existent feedback session "
                f"[{attributes.feedback_session_name}] in course [{attributes.course_id}]",
                details=context,
            )

        errors = self._get_structural_errors(attributes)

        existing = await feedback_question_crud.get_for_session(
            self.db, attributes.feedback_session_name, attributes.course_id
        )
        used_numbers = {q.question_number for q in existing}
        number = attributes.question_number
        if number < 1:
            errors.append("Question number must be at least 1")
        elif number in used_numbers:
            errors.append(f"Question number {number} already exists in this feedback session")
        elif number > len(existing) + 1:
            errors.append(
                f"Question number {number} is out of sequence; "
                f"the next question number is {len(existing) + 1}"
            )

        if errors:
            raise InvalidParametersError("; ".join(errors), details=context)

        question = await feedback_question_crud.create(
            self.db,
            course_id=attributes.course_id,
            feedback_session_name=attributes.feedback_session_name,
            question_number=number,
            giver_type=attributes.giver_type.value,
            recipient_type=attributes.recipient_type.value,
            number_of_entities_to_give_feedback_to=attributes.number_of_entities_to_give_feedback_to,
            show_responses_to=[p.value for p in attributes.show_responses_to],
            show_giver_name_to=[p.value for p in attributes.show_giver_name_to],
            show_recipient_name_to=[p.value for p in attributes.show_recipient_name_to],
            question_details=dump_question_details(attributes.question_details),
            question_description=attributes.question_description,
        )
        logger.info("Feedback question created", extra=context)
        return question
