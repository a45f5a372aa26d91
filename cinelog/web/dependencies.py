"""
FastAPI dependency injection for the database session.
"""

from typing import Generator
from sqlalchemy.orm import Session

from cinelog.database.connection import DatabaseManager, get_db_manager
from cinelog.web.config import get_database_url


def get_database_manager() -> DatabaseManager:
    """Get the process-wide DatabaseManager for the configured URL."""
    return get_db_manager(database_url=get_database_url())


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    with get_database_manager().session_scope() as session:
        yield session
