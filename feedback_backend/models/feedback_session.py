"""
Feedback session domain models and schemas.

Request/response schemas for feedback session operations.

Dependencies: pydantic
System role: Feedback session API contracts
"""

from datetime import datetime

from pydantic import AwareDatetime, BaseModel, Field

from feedback_backend.models.privileges import InstructorPrivilegeResponse


class FeedbackSessionCreateRequest(BaseModel):
    """Request schema for creating a feedback session."""

    feedback_session_name: str = Field(..., min_length=1, max_length=255, description="Session name")
    instructions: str = Field(..., description="Instructions shown to participants")
    submission_start_time: AwareDatetime = Field(..., description="Submission window opens")
    submission_end_time: AwareDatetime = Field(..., description="Submission window closes")
    grace_period: int = Field(..., ge=0, description="Grace period in minutes")
    session_visible_from_time: AwareDatetime = Field(..., description="Session visible to participants from")
    results_visible_from_time: AwareDatetime = Field(..., description="Responses visible from")
    is_closing_email_enabled: bool = Field(True, description="Send closing reminder emails")
    is_published_email_enabled: bool = Field(True, description="Send results-published emails")
    to_copy_course_id: str | None = Field(
        None,
        min_length=1,
        description="Copy questions from the same-named session of this course",
    )


class FeedbackSessionResponse(BaseModel):
    """Response schema for a feedback session."""

    course_id: str
    feedback_session_name: str
    creator_email: str
    instructions: str
    submission_start_time: datetime
    submission_end_time: datetime
    grace_period: int
    session_visible_from_time: datetime
    results_visible_from_time: datetime
    time_zone: str
    is_closing_email_enabled: bool
    is_published_email_enabled: bool
    created_at: datetime
    privileges: InstructorPrivilegeResponse | None = None
