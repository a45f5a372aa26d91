"""
Cinelog movie catalog application package.

This package contains the web layer, database operations, and shared
utilities for the server-rendered movie catalog.
"""

__version__ = "1.0.0"
