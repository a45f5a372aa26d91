"""
Movie pages and mutation endpoints.

Listing and detail pages are public. Creating, updating and deleting require
a signed-in user; anonymous visitors are redirected to the sign-in page
before the database is touched.
"""

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from cinelog.database import crud
from cinelog.web.context import RequestContext, get_context, get_identity, flash
from cinelog.web.dependencies import get_db
from cinelog.web.middleware import OVERRIDE_PARAM
from cinelog.web.models import (
    MovieCreate, MovieUpdate, MovieResponse, MovieResult, describe_validation_error,
)
from cinelog.web.templating import render, render_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["movies"])

MOVIE_NOT_FOUND = "Movie not found"
MOVIE_CREATED = "Movie successfully created."


def redirect_to_sign_in() -> RedirectResponse:
    return RedirectResponse("/auth/sign-in", status_code=status.HTTP_303_SEE_OTHER)


def not_found_result() -> JSONResponse:
    result = MovieResult(status="not_found", detail=MOVIE_NOT_FOUND)
    return JSONResponse(result.model_dump(), status_code=status.HTTP_404_NOT_FOUND)


async def read_body(request: Request) -> dict | list | None:
    """
    Read a JSON or form-encoded body without validating it.

    Blank form fields are dropped so they leave the stored value unchanged.
    Returns None when a JSON body cannot be decoded.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            return await request.json()
        except ValueError:
            # Malformed JSON or a body that is not valid UTF-8
            return None
    form = await request.form()
    return {
        key: value
        for key, value in form.items()
        if key != OVERRIDE_PARAM and isinstance(value, str) and value.strip()
    }


@router.get("/movies", response_class=HTMLResponse)
def list_movies(
    request: Request,
    ctx: RequestContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Render every movie in the catalog."""
    movies = crud.get_movies(db)
    return render(request, "movies.html", ctx, movies=movies)


@router.get("/new-movie", response_class=HTMLResponse)
def new_movie_form(request: Request, ctx: RequestContext = Depends(get_context)):
    return render(request, "new.html", ctx)


@router.get("/movies/{movie_id}", response_class=HTMLResponse)
def show_movie(
    movie_id: int,
    request: Request,
    ctx: RequestContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Render a movie with its owner and reviews."""
    movie = crud.get_movie_detail(db, movie_id)
    if movie is None:
        return render_error(request, ctx, MOVIE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
    return render(request, "show.html", ctx, movie=movie)


@router.post("/movies")
def create_movie(
    request: Request,
    name: str = Form(""),
    year: str = Form(""),
    rating: str = Form(""),
    ctx: RequestContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Create a movie owned by the signed-in user."""
    if not ctx.is_authenticated:
        return redirect_to_sign_in()

    try:
        movie_in = MovieCreate(name=name, year=year, rating=rating)
    except ValidationError as e:
        flash(request, describe_validation_error(e))
        return RedirectResponse("/movies", status_code=status.HTTP_303_SEE_OTHER)

    movie = crud.create_movie(
        db,
        name=movie_in.name,
        year=movie_in.year,
        rating=movie_in.rating,
        created_by=ctx.user.user_id,
    )
    logger.info("Movie %s created by user_id=%s", movie.movie_id, ctx.user.user_id)
    flash(request, MOVIE_CREATED)
    return RedirectResponse("/movies", status_code=status.HTTP_303_SEE_OTHER)


@router.put("/movies/{movie_id}", response_model=MovieResult)
def update_movie(
    movie_id: int,
    body: dict | list | None = Depends(read_body),
    ctx: RequestContext = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """Apply a partial update and return the stored movie."""
    if not ctx.is_authenticated:
        return redirect_to_sign_in()

    try:
        changes = MovieUpdate.model_validate(body).changes()
    except ValidationError as e:
        result = MovieResult(status="invalid", detail=describe_validation_error(e))
        return JSONResponse(result.model_dump(), status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)

    movie = crud.update_movie(db, movie_id, **changes)
    if movie is None:
        return not_found_result()
    logger.info("Movie %s updated by user_id=%s: %s", movie_id, ctx.user.user_id, sorted(changes))
    return MovieResult(status="updated", movie=MovieResponse.model_validate(movie))


@router.delete("/movies/{movie_id}", response_model=MovieResult)
def delete_movie(
    movie_id: int,
    ctx: RequestContext = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """Delete a movie and return what was removed."""
    if not ctx.is_authenticated:
        return redirect_to_sign_in()

    movie = crud.get_movie(db, movie_id)
    if movie is None:
        return not_found_result()
    deleted = MovieResponse.model_validate(movie)
    crud.delete_movie(db, movie_id)
    logger.info("Movie %s deleted by user_id=%s", movie_id, ctx.user.user_id)
    return MovieResult(status="deleted", movie=deleted)
