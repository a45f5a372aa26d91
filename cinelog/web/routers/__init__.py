"""
Route handlers.
"""

from cinelog.web.routers import pages, auth, movies, reviews, system

__all__ = ["pages", "auth", "movies", "reviews", "system"]
