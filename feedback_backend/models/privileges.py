"""
Instructor privilege schemas.

Dependencies: pydantic
System role: Privilege output attached to feedback session responses
"""

from pydantic import BaseModel


class InstructorPrivilegeResponse(BaseModel):
    """Effective privileges of the calling instructor for one session."""

    can_modify_course: bool
    can_modify_instructor: bool
    can_modify_session: bool
    can_modify_student: bool
    can_view_student_in_sections: bool
    can_view_session_in_sections: bool
    can_submit_session_in_sections: bool
    can_modify_session_comment_in_sections: bool
