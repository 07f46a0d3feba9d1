from .connection import (
    db_manager,
    init_database,
    close_database,
    get_database_engine,
    database_health_check,
)
from .session import (
    session_manager,
    initialize_sessions,
    get_db_session,
    database_session,
)

__all__ = [
    "db_manager",
    "init_database",
    "close_database",
    "get_database_engine",
    "database_health_check",
    "session_manager",
    "initialize_sessions",
    "get_db_session",
    "database_session",
]
