"""
Review endpoints nested under a movie.
"""

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from cinelog.database import crud
from cinelog.web.context import RequestContext, get_context
from cinelog.web.dependencies import get_db
from cinelog.web.models import ReviewCreate, describe_validation_error
from cinelog.web.routers.movies import MOVIE_NOT_FOUND, redirect_to_sign_in
from cinelog.web.templating import render, render_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies/{movie_id}/reviews", tags=["reviews"])


@router.get("", response_class=HTMLResponse)
def new_review_form(
    movie_id: int,
    request: Request,
    ctx: RequestContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Render the review form for an existing movie."""
    movie = crud.get_movie(db, movie_id)
    if movie is None:
        return render_error(request, ctx, MOVIE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
    return render(request, "newReview.html", ctx, movie=movie)


@router.post("")
def create_review(
    movie_id: int,
    request: Request,
    content: str = Form(""),
    rating: str = Form(""),
    ctx: RequestContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Append a review by the signed-in user and show the movie."""
    if not ctx.is_authenticated:
        return redirect_to_sign_in()

    movie = crud.get_movie(db, movie_id)
    if movie is None:
        return render_error(request, ctx, MOVIE_NOT_FOUND, status.HTTP_404_NOT_FOUND)

    try:
        review_in = ReviewCreate(content=content, rating=rating)
    except ValidationError as e:
        return render(
            request, "newReview.html", ctx,
            status_code=status.HTTP_400_BAD_REQUEST,
            movie=movie, error=describe_validation_error(e), content=content,
        )

    review = crud.add_review(
        db,
        movie,
        content=review_in.content,
        reviewer_id=ctx.user.user_id,
        rating=review_in.rating,
    )
    logger.info("Review %s added to movie %s by user_id=%s", review.review_id, movie_id, ctx.user.user_id)
    return RedirectResponse(f"/movies/{movie_id}", status_code=status.HTTP_303_SEE_OTHER)
