"""
Feedback session response mapping utilities.

Transforms ORM models and workflow results into Pydantic response models.

Dependencies: feedback_backend.models
System role: Feedback session response transformation
"""

from feedback_backend.boundary.db.models.feedback_question_model import FeedbackQuestionModel
from feedback_backend.boundary.db.models.feedback_session_model import FeedbackSessionModel
from feedback_backend.core import permissions
from feedback_backend.models.feedback_question import FeedbackQuestionResponse
from feedback_backend.models.feedback_session import FeedbackSessionResponse
from feedback_backend.models.privileges import InstructorPrivilegeResponse


def map_privileges_to_response(privileges: dict[str, bool]) -> InstructorPrivilegeResponse:
    """
    Transform effective privilege flags into InstructorPrivilegeResponse.

    Args:
        privileges: Flags keyed by privilege name

    Returns:
        InstructorPrivilegeResponse: Pydantic model for API response
    """
    return InstructorPrivilegeResponse(
        can_modify_course=privileges[permissions.CAN_MODIFY_COURSE],
        can_modify_instructor=privileges[permissions.CAN_MODIFY_INSTRUCTOR],
        can_modify_session=privileges[permissions.CAN_MODIFY_SESSION],
        can_modify_student=privileges[permissions.CAN_MODIFY_STUDENT],
        can_view_student_in_sections=privileges[permissions.CAN_VIEW_STUDENT_IN_SECTIONS],
        can_view_session_in_sections=privileges[permissions.CAN_VIEW_SESSION_IN_SECTIONS],
        can_submit_session_in_sections=privileges[permissions.CAN_SUBMIT_SESSION_IN_SECTIONS],
        can_modify_session_comment_in_sections=privileges[
            permissions.CAN_MODIFY_SESSION_COMMENT_IN_SECTIONS
        ],
    )


def map_feedback_session_to_response(
    feedback_session: FeedbackSessionModel,
    privileges: dict[str, bool] | None = None,
) -> FeedbackSessionResponse:
    """
    Transform a stored feedback session into FeedbackSessionResponse.

    Args:
        feedback_session: FeedbackSessionModel row
        privileges: Optional effective privileges of the caller

    Returns:
        FeedbackSessionResponse: Pydantic model for API response
    """
    return FeedbackSessionResponse(
        course_id=feedback_session.course_id,
        feedback_session_name=feedback_session.name,
        creator_email=feedback_session.creator_email,
        instructions=feedback_session.instructions,
        submission_start_time=feedback_session.start_time,
        submission_end_time=feedback_session.end_time,
        grace_period=feedback_session.grace_period_minutes,
        session_visible_from_time=feedback_session.session_visible_from_time,
        results_visible_from_time=feedback_session.results_visible_from_time,
        time_zone=feedback_session.time_zone,
        is_closing_email_enabled=feedback_session.is_closing_email_enabled,
        is_published_email_enabled=feedback_session.is_published_email_enabled,
        created_at=feedback_session.created_at,
        privileges=map_privileges_to_response(privileges) if privileges is not None else None,
    )


def map_question_to_response(question: FeedbackQuestionModel) -> FeedbackQuestionResponse:
    """
    Transform a stored feedback question into FeedbackQuestionResponse.

    Args:
        question: FeedbackQuestionModel row

    Returns:
        FeedbackQuestionResponse: Pydantic model for API response
    """
    return FeedbackQuestionResponse(
        id=question.id,
        course_id=question.course_id,
        feedback_session_name=question.feedback_session_name,
        question_number=question.question_number,
        giver_type=question.giver_type,
        recipient_type=question.recipient_type,
        number_of_entities_to_give_feedback_to=question.number_of_entities_to_give_feedback_to,
        show_responses_to=question.show_responses_to,
        show_giver_name_to=question.show_giver_name_to,
        show_recipient_name_to=question.show_recipient_name_to,
        question_details=question.question_details,
        question_description=question.question_description,
    )


def map_questions_to_response(questions: list[FeedbackQuestionModel]) -> list[FeedbackQuestionResponse]:
    """Transform a list of stored questions into FeedbackQuestionResponses."""
    return [map_question_to_response(q) for q in questions]
