# 📄 File: garden_planner/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) so each request
# either saves all of its changes or none of them.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy session management with dependency injection for FastAPI.
# One session per request wraps the read-decide-write steps of the layout validators
# in a single transaction: commit on success, rollback on any exception.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - garden_planner/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - garden_layout presentation dependencies (repositories per request)
# - tests (session manager initialized against SQLite)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from garden_planner.shared.core.exceptions import (
    ConflictError,
    DatabaseError,
    GardenPlannerException,
)
from garden_planner.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize the session factory with the database engine."""
        self._session_factory = async_sessionmaker(
            engine or get_database_engine(),
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=True,
        )
        logger.info("Database session factory initialized")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Domain exceptions pass through untouched after rollback so the API layer
        can render them; raw SQLAlchemy failures are translated.

        Yields:
            AsyncSession: Database session

        Raises:
            ConflictError: If a uniqueness constraint lost a race
            DatabaseError: If the session is not initialized or the database failed
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            yield session
            await session.commit()
            logger.debug("Database transaction committed")

        except GardenPlannerException:
            await session.rollback()
            raise

        except exc.IntegrityError as e:
            await session.rollback()
            logger.warning(f"Integrity error, transaction rolled back: {e.orig}")
            raise ConflictError("The change conflicts with existing data; please retry") from e

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}", exc_info=True)
            raise DatabaseError("Database operation failed") from e

        except BaseException:
            await session.rollback()
            raise

        finally:
            await session.close()

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


def initialize_sessions(engine: Optional[AsyncEngine] = None) -> None:
    """Initialize the global database session manager."""
    session_manager.initialize(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        @router.post("/beds")
        async def create_bed(
            payload: BedCreateRequest,
            db: AsyncSession = Depends(get_db_session)
        ):
            ...

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session


@asynccontextmanager
async def database_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for manual database session management.

    Example:
        async with database_session() as db:
            beds = await BedRepositoryImpl(db).list_for_owner(owner_id)

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session
