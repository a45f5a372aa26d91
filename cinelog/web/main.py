"""
FastAPI application entry point for the Cinelog movie catalog.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.sessions import SessionMiddleware

from cinelog import __version__
from cinelog.utils.logging_config import configure_web_logging, get_logger
from cinelog.web.config import (
    DEFAULT_SESSION_SECRET, get_session_secret, get_log_level, get_log_file, get_host, get_port,
)
from cinelog.web.context import get_context
from cinelog.web.dependencies import get_database_manager
from cinelog.web.middleware import MethodOverrideMiddleware, log_requests
from cinelog.web.routers import pages, auth, movies, reviews, system
from cinelog.web.templating import STATIC_DIR, render_error

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_web_logging(log_file=get_log_file(), level=get_log_level())
    if get_session_secret() == DEFAULT_SESSION_SECRET:
        logger.warning("SESSION_SECRET is not set; using the development default")
    get_database_manager().create_tables()
    logger.info("Cinelog %s ready", __version__)
    yield
    get_database_manager().close()


app = FastAPI(
    title="Cinelog",
    description="Server-rendered movie catalog with user accounts and reviews",
    version=__version__,
    lifespan=lifespan,
)

# Registered innermost first: sessions wrap method override wraps request logging
app.middleware("http")(log_requests)
app.add_middleware(MethodOverrideMiddleware)
app.add_middleware(SessionMiddleware, secret_key=get_session_secret(), https_only=False)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(pages.router)
app.include_router(auth.router)
app.include_router(movies.router)
app.include_router(reviews.router)
app.include_router(system.router)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Log database failures and show a generic error page."""
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return render_error(
        request,
        get_context(request),
        "Something went wrong while talking to the database.",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def run():
    """Serve the application with uvicorn."""
    uvicorn.run(app, host=get_host(), port=get_port())


if __name__ == "__main__":
    run()
