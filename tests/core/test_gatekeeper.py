"""
Tests for the gatekeeper access decision.

System role: Verification of UnauthorizedAccessError conditions
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from feedback_backend.core import permissions
from feedback_backend.core.exceptions import UnauthorizedAccessError
from feedback_backend.core.gatekeeper import privileges_of, verify_accessible


@pytest.fixture
def course() -> SimpleNamespace:
    return SimpleNamespace(id="CS101", deleted_at=None)


def make_instructor(course_id: str = "CS101", role: str = "Co-owner", privileges: dict | None = None):
    return SimpleNamespace(
        id=uuid.uuid4(),
        course_id=course_id,
        email="alice@uni.edu",
        role=role,
        privileges=privileges or {},
    )


class TestVerifyAccessible:
    """Test suite for verify_accessible()."""

    def test_should_pass_for_coowner(self, course: SimpleNamespace) -> None:
        verify_accessible(make_instructor(), course, permissions.CAN_MODIFY_SESSION)

    def test_should_reject_missing_instructor(self, course: SimpleNamespace) -> None:
        with pytest.raises(UnauthorizedAccessError, match="non-existent instructor"):
            verify_accessible(None, course, permissions.CAN_MODIFY_SESSION)

    def test_should_reject_missing_course(self) -> None:
        with pytest.raises(UnauthorizedAccessError, match="non-existent course"):
            verify_accessible(make_instructor(), None, permissions.CAN_MODIFY_SESSION)

    def test_should_reject_deleted_course(self, course: SimpleNamespace) -> None:
        course.deleted_at = datetime(2030, 1, 1, tzinfo=timezone.utc)

        with pytest.raises(UnauthorizedAccessError, match="deleted"):
            verify_accessible(make_instructor(), course, permissions.CAN_MODIFY_SESSION)

    def test_should_reject_instructor_of_other_course(self, course: SimpleNamespace) -> None:
        with pytest.raises(UnauthorizedAccessError, match="not accessible"):
            verify_accessible(make_instructor(course_id="CS102"), course, permissions.CAN_MODIFY_SESSION)

    def test_should_reject_missing_privilege(self, course: SimpleNamespace) -> None:
        observer = make_instructor(role=permissions.ROLE_OBSERVER)

        with pytest.raises(UnauthorizedAccessError, match=permissions.CAN_MODIFY_SESSION):
            verify_accessible(observer, course, permissions.CAN_MODIFY_SESSION)

    def test_should_honour_session_override(self, course: SimpleNamespace) -> None:
        tutor = make_instructor(
            role=permissions.ROLE_TUTOR,
            privileges={
                "session_level": {"Midterm": {permissions.CAN_VIEW_SESSION_IN_SECTIONS: False}}
            },
        )

        verify_accessible(tutor, course, permissions.CAN_VIEW_SESSION_IN_SECTIONS)
        with pytest.raises(UnauthorizedAccessError):
            verify_accessible(tutor, course, permissions.CAN_VIEW_SESSION_IN_SECTIONS, "Midterm")


def test_privileges_of_should_use_role_and_stored_document() -> None:
    instructor = make_instructor(
        role=permissions.ROLE_CUSTOM,
        privileges={"course_level": {permissions.CAN_MODIFY_STUDENT: True}},
    )

    privileges = privileges_of(instructor)

    assert privileges.is_allowed(permissions.CAN_MODIFY_STUDENT)
    assert not privileges.is_allowed(permissions.CAN_MODIFY_SESSION)
