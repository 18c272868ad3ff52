"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, entity seeding factories, request payloads
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from feedback_backend.boundary.db.base import Base
    import feedback_backend.boundary.db.models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_course(test_async_db):
    """Factory persisting a CourseModel."""
    from feedback_backend.boundary.db.models import CourseModel

    async def _make(course_id: str = "CS101", time_zone: str = "UTC", deleted_at=None):
        course = CourseModel(
            id=course_id,
            name=f"Course {course_id}",
            time_zone=time_zone,
            deleted_at=deleted_at,
        )
        test_async_db.add(course)
        await test_async_db.commit()
        return course

    return _make


@pytest.fixture
def make_instructor(test_async_db):
    """Factory persisting an InstructorModel."""
    from feedback_backend.boundary.db.models import InstructorModel

    async def _make(
        course_id: str = "CS101",
        principal_id: str | None = "alice",
        email: str = "alice@uni.edu",
        role: str = "Co-owner",
        privileges: dict | None = None,
    ):
        instructor = InstructorModel(
            course_id=course_id,
            principal_id=principal_id,
            name=email.split("@")[0].title(),
            email=email,
            role=role,
            privileges=privileges or {},
        )
        test_async_db.add(instructor)
        await test_async_db.commit()
        return instructor

    return _make


@pytest.fixture
def make_students(test_async_db):
    """Factory persisting StudentModels; teams are assigned round-robin."""
    from feedback_backend.boundary.db.models import StudentModel

    async def _make(course_id: str, count: int, teams: int = 1):
        students = [
            StudentModel(
                course_id=course_id,
                email=f"student{i}@{course_id.lower()}.edu",
                name=f"Student {i}",
                team_name=f"Team {i % teams + 1}",
            )
            for i in range(count)
        ]
        test_async_db.add_all(students)
        await test_async_db.commit()
        return students

    return _make


@pytest.fixture
def session_times() -> dict:
    """Consistent, valid time window for a feedback session."""
    start = datetime(2030, 3, 1, 9, 0, tzinfo=timezone.utc)
    return {
        "submission_start_time": start,
        "submission_end_time": start + timedelta(days=7),
        "session_visible_from_time": start - timedelta(days=1),
        "results_visible_from_time": start + timedelta(days=8),
    }


@pytest.fixture
def make_feedback_session(test_async_db, session_times):
    """Factory persisting a FeedbackSessionModel directly."""
    from feedback_backend.boundary.db.models import FeedbackSessionModel

    async def _make(course_id: str, name: str):
        feedback_session = FeedbackSessionModel(
            name=name,
            course_id=course_id,
            creator_email="source@uni.edu",
            instructions="Be honest",
            start_time=session_times["submission_start_time"],
            end_time=session_times["submission_end_time"],
            grace_period_minutes=15,
            session_visible_from_time=session_times["session_visible_from_time"],
            results_visible_from_time=session_times["results_visible_from_time"],
            time_zone="UTC",
        )
        test_async_db.add(feedback_session)
        await test_async_db.commit()
        return feedback_session

    return _make


@pytest.fixture
def make_question(test_async_db):
    """Factory persisting a FeedbackQuestionModel directly (bypassing validation)."""
    from feedback_backend.boundary.db.models import FeedbackQuestionModel

    async def _make(
        course_id: str,
        session_name: str,
        question_number: int,
        question_details: dict | None = None,
        giver_type: str = "STUDENTS",
        recipient_type: str = "SELF",
    ):
        question = FeedbackQuestionModel(
            course_id=course_id,
            feedback_session_name=session_name,
            question_number=question_number,
            giver_type=giver_type,
            recipient_type=recipient_type,
            number_of_entities_to_give_feedback_to=-100,
            show_responses_to=["INSTRUCTORS", "RECEIVER"],
            show_giver_name_to=["INSTRUCTORS"],
            show_recipient_name_to=["INSTRUCTORS", "RECEIVER"],
            question_details=question_details
            or {"question_type": "TEXT", "question_text": f"Question {question_number}"},
            question_description=f"Description {question_number}",
        )
        test_async_db.add(question)
        await test_async_db.commit()
        return question

    return _make


@pytest.fixture
def create_request_payload() -> dict:
    """JSON body of a valid feedback session creation request."""
    return {
        "feedback_session_name": "Midterm",
        "instructions": "Please answer all questions",
        "submission_start_time": "2030-03-01T09:00:00Z",
        "submission_end_time": "2030-03-08T09:00:00Z",
        "grace_period": 15,
        "session_visible_from_time": "2030-02-28T09:00:00Z",
        "results_visible_from_time": "2030-03-09T09:00:00Z",
        "is_closing_email_enabled": True,
        "is_published_email_enabled": False,
    }
