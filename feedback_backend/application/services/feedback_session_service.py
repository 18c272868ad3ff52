"""
Feedback session service.

Validates and persists feedback sessions.

Dependencies: sqlalchemy, feedback_backend.boundary.db.CRUD, feedback_backend.core
System role: Feedback session persistence rules
"""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.CRUD.feedback_session_crud import feedback_session_crud
from feedback_backend.boundary.db.models.feedback_session_model import FeedbackSessionModel
from feedback_backend.configs.feedback import FeedbackSessionSettings
from feedback_backend.core.entities import FeedbackSessionAttributes
from feedback_backend.core.exceptions import EntityAlreadyExistsError, InvalidParametersError

logger = logging.getLogger(__name__)

INVALID_NAME_CHARACTERS = frozenset("|%")


class FeedbackSessionService:
    """Feedback session persistence with domain validation."""

    def __init__(self, db: AsyncSession, settings: FeedbackSessionSettings | None = None) -> None:
        """
        Initialize feedback session service.

        Args:
            db: Async SQLAlchemy session
            settings: Session rule settings (defaults loaded from environment)
        """
        self.db = db
        self.settings = settings or FeedbackSessionSettings()

    def get_invalidity_info(self, attributes: FeedbackSessionAttributes) -> list[str]:
        """
        Collect every rule the attributes violate.

        Args:
            attributes: Session values to check

        Returns:
            list[str]: Human-readable violations, empty when valid
        """
        errors = []
        name = attributes.name
        max_length = self.settings.session_name_max_length
        if not name:
            errors.append("Feedback session name cannot be empty")
        elif len(name) > max_length:
            errors.append(
                f"Feedback session name \"{name}\" is too long; "
                f"the maximum length is {max_length} characters"
            )
        elif not name[0].isalnum():
            errors.append(f"Feedback session name \"{name}\" must start with an alphanumeric character")
        elif INVALID_NAME_CHARACTERS.intersection(name):
            errors.append(f"Feedback session name \"{name}\" cannot contain | or %")

        if attributes.end_time <= attributes.start_time:
            errors.append("The end time for this feedback session cannot be earlier than the start time")
        if attributes.session_visible_from_time > attributes.start_time:
            errors.append(
                "The start time for this feedback session cannot be earlier than "
                "the time when the session will be visible"
            )
        if attributes.results_visible_from_time < attributes.session_visible_from_time:
            errors.append(
                "The time when the results will be visible for this feedback session cannot be "
                "earlier than the time when the session will be visible"
            )
        if attributes.grace_period_minutes < 0:
            errors.append("Grace period cannot be negative")

        try:
            ZoneInfo(attributes.time_zone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"\"{attributes.time_zone}\" is not a valid time zone")
        return errors

    async def create_feedback_session(self, attributes: FeedbackSessionAttributes) -> FeedbackSessionModel:
        """
        Persist a new feedback session.

        Args:
            attributes: Session values

        Returns:
            FeedbackSessionModel: Created (flushed, uncommitted) session

        Raises:
            InvalidParametersError: If any rule is violated
            EntityAlreadyExistsError: If (name, course_id) already exists
        """
        errors = self.get_invalidity_info(attributes)
        if errors:
            raise InvalidParametersError(
                "; ".join(errors),
                details={"course_id": attributes.course_id, "feedback_session_name": attributes.name},
            )

        existing = await feedback_session_crud.get_by_name_and_course(
            self.db, attributes.name, attributes.course_id
        )
        if existing is not None:
            raise EntityAlreadyExistsError(
                f"Trying to create an entity that exists: feedback session "
                f"[{attributes.name}] in course [{attributes.course_id}]"
            )

        try:
            session = await feedback_session_crud.create(
                self.db,
                name=attributes.name,
                course_id=attributes.course_id,
                creator_email=attributes.creator_email,
                time_zone=attributes.time_zone,
                instructions=attributes.instructions,
                start_time=attributes.start_time,
                end_time=attributes.end_time,
                grace_period_minutes=attributes.grace_period_minutes,
                session_visible_from_time=attributes.session_visible_from_time,
                results_visible_from_time=attributes.results_visible_from_time,
                is_closing_email_enabled=attributes.is_closing_email_enabled,
                is_published_email_enabled=attributes.is_published_email_enabled,
            )
        except IntegrityError as e:
            # Lost a race against a concurrent creation of the same session
            await self.db.rollback()
            raise EntityAlreadyExistsError(
                f"Trying to create an entity that exists: feedback session "
                f"[{attributes.name}] in course [{attributes.course_id}]"
            ) from e

        logger.info(
            "Feedback session created",
            extra={"course_id": attributes.course_id, "feedback_session_name": attributes.name},
        )
        return session

    async def get_feedback_session(self, name: str, course_id: str) -> FeedbackSessionModel | None:
        """
        Get a feedback session by exact name.

        Args:
            name: Session name
            course_id: Course identifier

        Returns:
            FeedbackSessionModel if found, None otherwise
        """
        return await feedback_session_crud.get_by_name_and_course(self.db, name, course_id)
