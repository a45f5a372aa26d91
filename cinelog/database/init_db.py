"""
Database initialization and schema verification.
"""

import logging

from sqlalchemy import inspect

from cinelog.database.connection import DatabaseManager, get_db_manager, DEFAULT_DATABASE_URL

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'users', 'movies', 'reviews'}


def init_database(database_url: str = DEFAULT_DATABASE_URL, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        database_url: SQLAlchemy database URL
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(database_url=database_url)

    if reset:
        logger.warning("Resetting database (dropping all tables)")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready")

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())

    missing_tables = EXPECTED_TABLES - existing_tables
    if missing_tables:
        logger.error("Missing tables: %s", sorted(missing_tables))
        return False

    return True
