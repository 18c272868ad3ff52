"""
Entity attribute objects passed to the persistence services.

Dependencies: dataclasses (stdlib), feedback_backend.core.question_details
System role: Unpersisted feedback session and question values
"""

from dataclasses import dataclass, field
from datetime import datetime

from feedback_backend.core.question_details import (
    FeedbackParticipantType,
    FeedbackQuestionDetails,
    parse_question_details,
)


@dataclass
class FeedbackSessionAttributes:
    """Values of a feedback session about to be created."""

    name: str
    course_id: str
    creator_email: str
    time_zone: str
    instructions: str
    start_time: datetime
    end_time: datetime
    grace_period_minutes: int
    session_visible_from_time: datetime
    results_visible_from_time: datetime
    is_closing_email_enabled: bool
    is_published_email_enabled: bool


@dataclass
class FeedbackQuestionAttributes:
    """Values of a feedback question about to be created."""

    course_id: str
    feedback_session_name: str
    question_number: int
    giver_type: FeedbackParticipantType
    recipient_type: FeedbackParticipantType
    question_details: FeedbackQuestionDetails
    number_of_entities_to_give_feedback_to: int = -100
    show_responses_to: list[FeedbackParticipantType] = field(default_factory=list)
    show_giver_name_to: list[FeedbackParticipantType] = field(default_factory=list)
    show_recipient_name_to: list[FeedbackParticipantType] = field(default_factory=list)
    question_description: str | None = None

    @classmethod
    def from_model(cls, question) -> "FeedbackQuestionAttributes":
        """
        Build attributes from a persisted FeedbackQuestionModel.

        Details are parsed into a fresh object, so mutating the result never
        touches the source row.
        """
        return cls(
            course_id=question.course_id,
            feedback_session_name=question.feedback_session_name,
            question_number=question.question_number,
            giver_type=FeedbackParticipantType(question.giver_type),
            recipient_type=FeedbackParticipantType(question.recipient_type),
            question_details=parse_question_details(question.question_details),
            number_of_entities_to_give_feedback_to=question.number_of_entities_to_give_feedback_to,
            show_responses_to=[FeedbackParticipantType(v) for v in question.show_responses_to],
            show_giver_name_to=[FeedbackParticipantType(v) for v in question.show_giver_name_to],
            show_recipient_name_to=[FeedbackParticipantType(v) for v in question.show_recipient_name_to],
            question_description=question.question_description,
        )
