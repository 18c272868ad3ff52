"""
Feedback question schemas.

Dependencies: pydantic, feedback_backend.core.question_details
System role: Feedback question API contracts
"""

import uuid

from pydantic import BaseModel

from feedback_backend.core.question_details import FeedbackParticipantType, FeedbackQuestionDetails


class FeedbackQuestionResponse(BaseModel):
    """Response schema for a feedback question."""

    id: uuid.UUID
    course_id: str
    feedback_session_name: str
    question_number: int
    giver_type: FeedbackParticipantType
    recipient_type: FeedbackParticipantType
    number_of_entities_to_give_feedback_to: int
    show_responses_to: list[FeedbackParticipantType]
    show_giver_name_to: list[FeedbackParticipantType]
    show_recipient_name_to: list[FeedbackParticipantType]
    question_details: FeedbackQuestionDetails
    question_description: str | None = None
