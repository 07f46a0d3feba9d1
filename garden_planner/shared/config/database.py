# 📄 File: garden_planner/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to the Garden Planner database and making sure every
# table we define shares the same naming rules.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async engine configuration with connection pooling, environment-specific
# settings for PostgreSQL (asyncpg) and SQLite (aiosqlite), and the declarative base.
#
# 🔗 Dependencies:
# - SQLAlchemy async engine
# - garden_planner.shared.config.settings
# - asyncpg / aiosqlite drivers
#
# 🔄 Connected Modules / Calls From:
# - garden_planner.shared.infrastructure.database.connection
# - ORM models in every module
# - Alembic migrations (metadata)

from typing import Any, Dict

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from .settings import Settings, get_settings


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """Database configuration class with environment-specific settings."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    @property
    def database_url(self) -> str:
        """Get the database URL for async connections."""
        return self.settings.database_url

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine configuration based on the target database."""

        base_config: Dict[str, Any] = {
            "echo": self.settings.DB_ECHO,
        }

        if self.settings.is_sqlite:
            # In-memory SQLite must share one connection or every session sees an empty db
            if ":memory:" in self.database_url:
                base_config["poolclass"] = StaticPool
            base_config["connect_args"] = {"check_same_thread": False}
            return base_config

        base_config.update({
            "pool_size": self.settings.DB_POOL_SIZE,
            "max_overflow": self.settings.DB_MAX_OVERFLOW,
            "pool_timeout": self.settings.DB_POOL_TIMEOUT,
            "pool_recycle": self.settings.DB_POOL_RECYCLE,
            "pool_pre_ping": True,
            "connect_args": {
                "server_settings": {
                    "application_name": f"garden_planner_{self.settings.ENVIRONMENT}",
                    "jit": "off",
                },
                "command_timeout": 60,
            },
        })

        if self.settings.is_production:
            base_config["connect_args"]["server_settings"].update({
                "timezone": "UTC",
                "statement_timeout": "30000",
                "idle_in_transaction_session_timeout": "60000",
            })

        return base_config

    def create_async_engine(self) -> AsyncEngine:
        """Create and configure async database engine."""
        return create_async_engine(self.database_url, **self.engine_kwargs)


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides the shared metadata (and its constraint naming convention)
    for every table in the Garden Planner application.
    """
    metadata = metadata
