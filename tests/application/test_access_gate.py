"""
Tests for AccessGate.

System role: Verification of the authorization precondition
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from feedback_backend.application.services.access_gate import AccessGate
from feedback_backend.boundary.db.models import FeedbackQuestionModel, FeedbackSessionModel
from feedback_backend.core import permissions
from feedback_backend.core.exceptions import UnauthorizedAccessError


@pytest.fixture
def gate(test_async_db) -> AccessGate:
    return AccessGate(test_async_db)


async def assert_nothing_stored(db) -> None:
    assert await db.scalar(select(func.count()).select_from(FeedbackSessionModel)) == 0
    assert await db.scalar(select(func.count()).select_from(FeedbackQuestionModel)) == 0


class TestAuthorize:
    """Test suite for AccessGate.authorize()."""

    @pytest.mark.asyncio
    async def test_should_return_instructor_and_course(
        self, gate: AccessGate, make_course, make_instructor
    ) -> None:
        await make_course("CS101", time_zone="Asia/Singapore")
        await make_instructor("CS101", principal_id="alice")

        instructor, course = await gate.authorize("alice", "CS101")

        assert instructor.email == "alice@uni.edu"
        assert course.id == "CS101"
        assert course.time_zone == "Asia/Singapore"

    @pytest.mark.asyncio
    async def test_should_reject_unknown_principal(
        self, gate: AccessGate, make_course, make_instructor, test_async_db
    ) -> None:
        await make_course("CS101")
        await make_instructor("CS101", principal_id="alice")

        with pytest.raises(UnauthorizedAccessError):
            await gate.authorize("mallory", "CS101")

        await assert_nothing_stored(test_async_db)

    @pytest.mark.asyncio
    async def test_should_reject_unknown_course(self, gate: AccessGate, test_async_db) -> None:
        with pytest.raises(UnauthorizedAccessError):
            await gate.authorize("alice", "NOPE")

        await assert_nothing_stored(test_async_db)

    @pytest.mark.asyncio
    async def test_should_reject_instructor_of_other_course(
        self, gate: AccessGate, make_course, make_instructor, test_async_db
    ) -> None:
        await make_course("CS101")
        await make_course("CS102")
        await make_instructor("CS101", principal_id="alice")

        with pytest.raises(UnauthorizedAccessError):
            await gate.authorize("alice", "CS102")

        await assert_nothing_stored(test_async_db)

    @pytest.mark.asyncio
    async def test_should_reject_deleted_course(
        self, gate: AccessGate, make_course, make_instructor, test_async_db
    ) -> None:
        await make_course("CS101", deleted_at=datetime(2030, 1, 1, tzinfo=timezone.utc))
        await make_instructor("CS101", principal_id="alice")

        with pytest.raises(UnauthorizedAccessError, match="deleted"):
            await gate.authorize("alice", "CS101")

        await assert_nothing_stored(test_async_db)

    @pytest.mark.asyncio
    async def test_observer_should_not_modify_sessions(
        self, gate: AccessGate, make_course, make_instructor, test_async_db
    ) -> None:
        await make_course("CS101")
        await make_instructor("CS101", principal_id="olga", email="olga@uni.edu", role="Observer")

        with pytest.raises(UnauthorizedAccessError):
            await gate.authorize("olga", "CS101")

        await assert_nothing_stored(test_async_db)

    @pytest.mark.asyncio
    async def test_observer_should_view_sessions(
        self, gate: AccessGate, make_course, make_instructor
    ) -> None:
        await make_course("CS101")
        await make_instructor("CS101", principal_id="olga", email="olga@uni.edu", role="Observer")

        instructor, _ = await gate.authorize(
            "olga", "CS101", permissions.CAN_VIEW_SESSION_IN_SECTIONS
        )

        assert instructor.role == "Observer"
