"""
Web application configuration loaded from environment or defaults.

A ``.env`` file in the working directory is loaded once on import; values
already present in the process environment take precedence.
"""

import os

from dotenv import load_dotenv

from cinelog.database.connection import DEFAULT_DATABASE_URL

load_dotenv()

DEFAULT_SESSION_SECRET = "dev-secret-change-me"


def get_database_url() -> str:
    """Get SQLAlchemy database URL from env or default."""
    return os.getenv("DATABASE_URL", "") or DEFAULT_DATABASE_URL


def get_session_secret() -> str:
    """Get the key used to sign session cookies."""
    return os.getenv("SESSION_SECRET", "") or DEFAULT_SESSION_SECRET


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name (under ``logs/``), or None for console only."""
    return os.getenv("LOG_FILE") or None


def get_host() -> str:
    """Get host for binding."""
    return os.getenv("HOST", "0.0.0.0")


def get_port() -> int:
    """Get port for binding."""
    return int(os.getenv("PORT", "4000"))
