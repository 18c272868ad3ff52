"""
Shared persistence operations for the course and feedback models.

Model-specific CRUD classes inherit insertion and primary-key lookup and add
their own course-scoped queries.

Dependencies: sqlalchemy
System role: Common base of the CRUD singletons
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_backend.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Insert and primary-key lookup for one mapped model.

    Writes are flushed, never committed; the calling service owns the
    transaction boundary.

    Attributes:
        model: Mapped class the queries target
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Insert a row and return it with server-side defaults loaded.

        Args:
            session: Async database session
            **kwargs: Column values

        Returns:
            The flushed and refreshed instance

        Raises:
            IntegrityError: A unique or foreign key constraint rejected the row
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: Any) -> ModelT | None:
        """
        Look up a row by primary key (string course ids, UUIDs elsewhere).

        Returns:
            The instance, or None when no row matches
        """
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()
