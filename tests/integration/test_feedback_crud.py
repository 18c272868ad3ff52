"""
Integration tests for the course-scoped CRUD singletons.

Runs against the in-memory SQLite database.

System role: Verification of lookup, ordering and counting queries
"""

import pytest
from sqlalchemy.exc import IntegrityError

from feedback_backend.boundary.db.CRUD import (
    course_crud,
    feedback_question_crud,
    feedback_session_crud,
    instructor_crud,
    student_crud,
)


class TestCourseAndInstructorCRUD:
    """Course and instructor lookups."""

    @pytest.mark.asyncio
    async def test_course_should_be_found_by_string_id(self, test_async_db, make_course) -> None:
        await make_course("CS101", time_zone="Europe/Berlin")

        course = await course_crud.get_by_id(test_async_db, "CS101")

        assert course.time_zone == "Europe/Berlin"
        assert await course_crud.get_by_id(test_async_db, "CS999") is None

    @pytest.mark.asyncio
    async def test_instructor_should_be_scoped_to_course(
        self, test_async_db, make_course, make_instructor
    ) -> None:
        await make_course("CS101")
        await make_course("CS102")
        await make_instructor("CS101", principal_id="alice", email="alice@uni.edu")
        await make_instructor("CS102", principal_id="alice", email="alice@uni.edu")
        await make_instructor("CS102", principal_id="bob", email="bob@uni.edu")

        found = await instructor_crud.get_by_course_and_principal(test_async_db, "CS102", "alice")

        assert found.course_id == "CS102"
        assert await instructor_crud.get_by_course_and_principal(test_async_db, "CS101", "bob") is None
        assert await instructor_crud.count_by_course_id(test_async_db, "CS102") == 2


class TestStudentCRUD:
    """Student counting."""

    @pytest.mark.asyncio
    async def test_should_count_students_and_teams(
        self, test_async_db, make_course, make_students
    ) -> None:
        await make_course("CS101")
        await make_students("CS101", count=7, teams=3)

        assert await student_crud.count_by_course_id(test_async_db, "CS101") == 7
        assert await student_crud.count_teams_by_course_id(test_async_db, "CS101") == 3


class TestFeedbackSessionCRUD:
    """Feedback session identity and uniqueness."""

    @pytest.mark.asyncio
    async def test_should_find_session_by_name_and_course(
        self, test_async_db, make_course, make_feedback_session
    ) -> None:
        await make_course("CS101")
        await make_feedback_session("CS101", "Midterm")
        await make_feedback_session("CS101", "Final")

        found = await feedback_session_crud.get_by_name_and_course(test_async_db, "Midterm", "CS101")

        assert found.name == "Midterm"
        assert await feedback_session_crud.get_by_name_and_course(test_async_db, "Midterm", "CS102") is None

    @pytest.mark.asyncio
    async def test_unique_constraint_should_reject_duplicate(
        self, test_async_db, make_course, make_feedback_session
    ) -> None:
        await make_course("CS101")
        await make_feedback_session("CS101", "Midterm")

        with pytest.raises(IntegrityError):
            await make_feedback_session("CS101", "Midterm")


class TestFeedbackQuestionCRUD:
    """Feedback question listing."""

    @pytest.mark.asyncio
    async def test_should_list_only_the_sessions_questions_in_order(
        self, test_async_db, make_course, make_feedback_session, make_question
    ) -> None:
        await make_course("CS101")
        await make_feedback_session("CS101", "Midterm")
        await make_feedback_session("CS101", "Final")
        await make_question("CS101", "Midterm", 2)
        await make_question("CS101", "Final", 1)
        await make_question("CS101", "Midterm", 1)

        questions = await feedback_question_crud.get_for_session(test_async_db, "Midterm", "CS101")

        assert [(q.feedback_session_name, q.question_number) for q in questions] == [
            ("Midterm", 1),
            ("Midterm", 2),
        ]
