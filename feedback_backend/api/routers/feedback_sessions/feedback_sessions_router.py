"""
Feedback session API endpoints.

Routes:
- POST /feedback-sessions?courseid= - Create feedback session (optionally copying questions)
- GET /feedback-sessions?courseid=&fsname= - Get a feedback session
- GET /feedback-questions?courseid=&fsname= - List the questions of a feedback session

Dependencies: feedback_backend.application.services, feedback_backend.models
System role: Feedback session management HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from feedback_backend.application.services import (
    AccessGate,
    FeedbackQuestionService,
    FeedbackSessionService,
    SessionCreator,
)
from feedback_backend.api.deps.dependencies import (
    get_access_gate,
    get_current_principal,
    get_feedback_question_service,
    get_feedback_session_service,
    get_session_creator,
)
from feedback_backend.core.gatekeeper import privileges_of
from feedback_backend.core.permissions import CAN_VIEW_SESSION_IN_SECTIONS
from feedback_backend.models.common import ErrorResponse
from feedback_backend.models.feedback_question import FeedbackQuestionResponse
from feedback_backend.models.feedback_session import (
    FeedbackSessionCreateRequest,
    FeedbackSessionResponse,
)

from .session_error_handling import handle_feedback_session_errors
from .session_responses import (
    map_feedback_session_to_response,
    map_questions_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["feedback-sessions"])


@router.post(
    "/feedback-sessions",
    response_model=FeedbackSessionResponse,
    status_code=201,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@handle_feedback_session_errors
async def create_feedback_session(
    courseid: str = Query(..., min_length=1, description="Course to create the session in"),
    body: dict[str, Any] = Body(...),
    principal_id: str = Depends(get_current_principal),
    access_gate: AccessGate = Depends(get_access_gate),
    session_creator: SessionCreator = Depends(get_session_creator),
) -> FeedbackSessionResponse:
    """
    Create a feedback session, optionally copying questions from another course.

    The access check runs before the body is validated so that an
    unauthorized caller learns nothing about the request's validity.

    Args:
        courseid: Course identifier
        body: Raw FeedbackSessionCreateRequest payload
        principal_id: Authenticated caller
        access_gate: Injected AccessGate
        session_creator: Injected SessionCreator

    Returns:
        FeedbackSessionResponse: Created session with caller privileges

    Raises:
        HTTPException(401): No principal
        HTTPException(403): Caller may not modify sessions in the course
        HTTPException(400): Invalid request, duplicate session or failed question copy
        HTTPException(500): Creation failed
    """
    instructor, course = await access_gate.authorize(principal_id, courseid)

    create_request = FeedbackSessionCreateRequest.model_validate(body)

    logger.info(
        "Creating feedback session",
        extra={
            "course_id": courseid,
            "feedback_session_name": create_request.feedback_session_name,
            "to_copy_course_id": create_request.to_copy_course_id,
        },
    )

    created = await session_creator.create(courseid, instructor, course, create_request)

    logger.info(
        "Feedback session created successfully",
        extra={
            "course_id": courseid,
            "feedback_session_name": created.feedback_session.name,
            "copied_questions": len(created.copy_report.outcomes) if created.copy_report else 0,
        },
    )

    return map_feedback_session_to_response(created.feedback_session, created.privileges)


@router.get("/feedback-sessions", response_model=FeedbackSessionResponse)
@handle_feedback_session_errors
async def get_feedback_session(
    courseid: str = Query(..., min_length=1),
    fsname: str = Query(..., min_length=1),
    principal_id: str = Depends(get_current_principal),
    access_gate: AccessGate = Depends(get_access_gate),
    session_service: FeedbackSessionService = Depends(get_feedback_session_service),
) -> FeedbackSessionResponse:
    """
    Get a feedback session by exact name.

    Raises:
        HTTPException(403): Caller may not view sessions in the course
        HTTPException(404): Session not found
    """
    instructor, _ = await access_gate.authorize(principal_id, courseid, CAN_VIEW_SESSION_IN_SECTIONS)

    feedback_session = await session_service.get_feedback_session(fsname, courseid)
    if feedback_session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feedback session [{fsname}] not found in course [{courseid}]",
        )

    privileges = privileges_of(instructor).for_session(feedback_session.name)
    return map_feedback_session_to_response(feedback_session, privileges)


@router.get("/feedback-questions", response_model=list[FeedbackQuestionResponse])
@handle_feedback_session_errors
async def get_feedback_questions(
    courseid: str = Query(..., min_length=1),
    fsname: str = Query(..., min_length=1),
    principal_id: str = Depends(get_current_principal),
    access_gate: AccessGate = Depends(get_access_gate),
    session_service: FeedbackSessionService = Depends(get_feedback_session_service),
    question_service: FeedbackQuestionService = Depends(get_feedback_question_service),
) -> list[FeedbackQuestionResponse]:
    """
    List the questions of a feedback session in question-number order.

    Raises:
        HTTPException(403): Caller may not view sessions in the course
        HTTPException(404): Session not found
    """
    await access_gate.authorize(principal_id, courseid, CAN_VIEW_SESSION_IN_SECTIONS)

    feedback_session = await session_service.get_feedback_session(fsname, courseid)
    if feedback_session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feedback session [{fsname}] not found in course [{courseid}]",
        )

    questions = await question_service.get_feedback_questions_for_session(fsname, courseid)
    return map_questions_to_response(questions)
