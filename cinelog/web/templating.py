"""
Jinja2 template rendering with the request context exposed to every view.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from cinelog.web.context import RequestContext

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    name: str,
    context: RequestContext,
    status_code: int = 200,
    **data,
):
    """
    Render a template with ``user`` and ``message`` taken from the context.

    Args:
        request: Incoming request
        name: Template path relative to the templates directory
        context: Per-request context
        status_code: HTTP status of the response
        **data: Handler-provided template variables
    """
    values = {"user": context.user, "message": context.message}
    values.update(data)
    return templates.TemplateResponse(request, name, values, status_code=status_code)


def render_error(request: Request, context: RequestContext, error: str, status_code: int):
    """Render the generic error page."""
    return render(request, "error.html", context, status_code=status_code, error=error)
