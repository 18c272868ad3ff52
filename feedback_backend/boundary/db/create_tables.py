"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, feedback_backend.configs
System role: Database schema initialization

Usage:
    python -m feedback_backend.boundary.db.create_tables
"""

import asyncio
import logging

from feedback_backend.boundary.db.base import Base
from feedback_backend.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from feedback_backend.boundary.db import models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created successfully")


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("All tables dropped successfully")


if __name__ == "__main__":
    from feedback_backend.observability import configure_logging

    configure_logging()
    asyncio.run(create_all_tables())
