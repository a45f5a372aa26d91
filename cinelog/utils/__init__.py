"""
Shared utilities package.

This package contains logging configuration and password hashing helpers
used across the application.
"""

from cinelog.utils.logging_config import setup_logging, get_logger
from cinelog.utils.security import hash_password, verify_password

__all__ = ['setup_logging', 'get_logger', 'hash_password', 'verify_password']
