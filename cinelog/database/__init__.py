"""
Database module for the movie catalog.

This module provides database models, connection management, and CRUD operations
using SQLAlchemy ORM.
"""

from cinelog.database.models import Base, User, Movie, Review
from cinelog.database.connection import DatabaseManager, get_db_manager
from cinelog.database.init_db import init_database, verify_schema
from cinelog.database import crud

__all__ = [
    # Models
    'Base',
    'User',
    'Movie',
    'Review',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
