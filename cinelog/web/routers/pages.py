"""
Landing page.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from cinelog.web.context import RequestContext, get_context
from cinelog.web.templating import render

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
def home(request: Request, ctx: RequestContext = Depends(get_context)):
    """Render the landing page."""
    return render(request, "home.html", ctx)
