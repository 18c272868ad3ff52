"""
Access control decisions for instructor actions.

Dependencies: feedback_backend.core.permissions, feedback_backend.core.exceptions
System role: Pure permission check raising UnauthorizedAccessError
"""

import logging

from feedback_backend.core.exceptions import UnauthorizedAccessError
from feedback_backend.core.permissions import InstructorPrivileges

logger = logging.getLogger(__name__)


def privileges_of(instructor) -> InstructorPrivileges:
    """Resolve the privileges of an instructor record."""
    return InstructorPrivileges.for_role(instructor.role, instructor.privileges)


def verify_accessible(
    instructor,
    course,
    privilege: str,
    session_name: str | None = None,
) -> None:
    """
    Verify an instructor holds a privilege in a course.

    Args:
        instructor: InstructorModel or None if lookup failed
        course: CourseModel or None if lookup failed
        privilege: Privilege name from feedback_backend.core.permissions
        session_name: Optional session for session-level overrides

    Raises:
        UnauthorizedAccessError: On any missing record, course mismatch,
            deleted course, or missing privilege
    """
    if instructor is None:
        raise UnauthorizedAccessError("Trying to access system using a non-existent instructor entity")
    if course is None:
        raise UnauthorizedAccessError("Trying to access system using a non-existent course entity")
    if course.deleted_at is not None:
        raise UnauthorizedAccessError("The course has been deleted")
    if instructor.course_id != course.id:
        raise UnauthorizedAccessError(f"Course [{course.id}] is not accessible to instructor")

    if not privileges_of(instructor).is_allowed(privilege, session_name):
        logger.info(
            "Privilege check failed",
            extra={"course_id": course.id, "privilege": privilege, "instructor_id": str(instructor.id)},
        )
        raise UnauthorizedAccessError(
            f"Course [{course.id}] is not accessible to instructor [{instructor.email}] "
            f"for privilege [{privilege}]"
        )
