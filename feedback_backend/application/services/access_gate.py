"""
Access gate for instructor actions on a course.

Resolves the caller to an instructor record and the course, then checks a
privilege. Runs before any feedback session or question is read or written.

Dependencies: feedback_backend.application.services, feedback_backend.core.gatekeeper
System role: Authorization precondition for session workflows
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.application.services.course_service import CourseService
from feedback_backend.application.services.instructor_service import InstructorService
from feedback_backend.boundary.db.models.course_model import CourseModel
from feedback_backend.boundary.db.models.instructor_model import InstructorModel
from feedback_backend.core import gatekeeper
from feedback_backend.core.permissions import CAN_MODIFY_SESSION

logger = logging.getLogger(__name__)


class AccessGate:
    """Instructor privilege gate."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize access gate with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.courses = CourseService(db)
        self.instructors = InstructorService(db)

    async def authorize(
        self,
        principal_id: str,
        course_id: str,
        privilege: str = CAN_MODIFY_SESSION,
    ) -> tuple[InstructorModel, CourseModel]:
        """
        Require the caller to hold a privilege in a course.

        Args:
            principal_id: Login identity of the caller
            course_id: Course identifier
            privilege: Privilege to require (defaults to modifying sessions)

        Returns:
            tuple[InstructorModel, CourseModel]: The resolved records

        Raises:
            UnauthorizedAccessError: If the instructor or course is missing or
                the privilege is not held
        """
        instructor = await self.instructors.get_instructor_for_principal(course_id, principal_id)
        course = await self.courses.get_course(course_id)

        gatekeeper.verify_accessible(instructor, course, privilege)

        logger.debug(
            "Access granted",
            extra={"course_id": course_id, "principal_id": principal_id, "privilege": privilege},
        )
        return instructor, course
