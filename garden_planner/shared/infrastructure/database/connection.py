# 📄 File: garden_planner/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, making sure we can talk to the place where gardens,
# beds and plant placements are stored, and closing it cleanly on shutdown.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy engine lifecycle management with health checks
# and retry logic for robust database connectivity across all modules.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - garden_planner/shared/config/database.py (engine configuration)
# - asyncpg / aiosqlite drivers
#
# 🔄 Connected Modules / Calls From:
# - garden_planner/shared/infrastructure/database/session.py (session management)
# - garden_planner/main.py (startup/shutdown)
# - garden_planner/api/v1/health.py (database health)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from garden_planner.shared.config.database import DatabaseConfig

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Manages database engine lifecycle, health monitoring
    and retry of the connectivity check.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 0.5

    async def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """
        Initialize the database engine.

        Args:
            engine: Pre-built engine to adopt instead of building one from settings
        """
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        self._engine = engine or DatabaseConfig().create_async_engine()
        logger.info(f"Database engine initialized for {self._engine.url.render_as_string(hide_password=True)}")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    await conn.execute(self._health_check_query)

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except (SQLAlchemyError, OSError) as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(engine: Optional[AsyncEngine] = None) -> None:
    """Initialize the global database connection manager."""
    await db_manager.initialize(engine)


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Returns:
        AsyncEngine: SQLAlchemy async engine

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    """Perform database health check."""
    return await db_manager.health_check()
