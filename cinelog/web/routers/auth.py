"""
Sign-up, sign-in and sign-out endpoints.
"""

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from cinelog.database import crud
from cinelog.utils.security import hash_password, verify_password
from cinelog.web.context import RequestContext, get_context, sign_in, sign_out
from cinelog.web.dependencies import get_db
from cinelog.web.models import SignUpForm, SignInForm, describe_validation_error
from cinelog.web.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

LOGIN_FAILED = "Login Failed"


@router.get("/sign-up", response_class=HTMLResponse)
def sign_up_form(request: Request, ctx: RequestContext = Depends(get_context)):
    return render(request, "auth/sign-up.html", ctx)


@router.post("/sign-up")
def sign_up(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    ctx: RequestContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Create an account and send the visitor back to the landing page."""
    try:
        form = SignUpForm(username=username, password=password)
        user = crud.create_user(db, username=form.username, password_hash=hash_password(form.password))
    except ValidationError as e:
        return render(
            request, "auth/sign-up.html", ctx,
            status_code=status.HTTP_400_BAD_REQUEST,
            error=describe_validation_error(e), username=username,
        )
    except ValueError as e:
        return render(
            request, "auth/sign-up.html", ctx,
            status_code=status.HTTP_400_BAD_REQUEST,
            error=str(e), username=username,
        )
    logger.info("New user signed up: user_id=%s", user.user_id)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/sign-in", response_class=HTMLResponse)
def sign_in_form(request: Request, ctx: RequestContext = Depends(get_context)):
    return render(request, "auth/sign-in.html", ctx)


@router.post("/sign-in")
def sign_in_submit(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    """Check credentials and store the user in the session."""
    form = SignInForm(username=username, password=password)
    user = crud.get_user_by_username(db, form.username)
    if user is None or not verify_password(form.password, user.password):
        logger.info("Failed sign-in for username=%r", form.username)
        return PlainTextResponse(LOGIN_FAILED, status_code=status.HTTP_401_UNAUTHORIZED)

    sign_in(request, user_id=user.user_id, username=user.username)
    logger.info("User signed in: user_id=%s", user.user_id)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/sign-out")
def sign_out_submit(request: Request):
    sign_out(request)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
