"""
Per-request context built from the signed session cookie.

Handlers receive an immutable ``RequestContext`` through ``Depends`` instead
of reading session state directly. Building the context consumes the flash
message, so a message is displayed on exactly one rendered request.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

SESSION_USER_KEY = "user"
SESSION_MESSAGE_KEY = "message"


@dataclass(frozen=True)
class SessionUser:
    """Signed-in user as stored in the session."""

    user_id: int
    username: str


@dataclass(frozen=True)
class RequestContext:
    """Identity and flash message for a single request."""

    user: Optional[SessionUser] = None
    message: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


def _session_user(data) -> Optional[SessionUser]:
    if not isinstance(data, dict):
        return None
    try:
        return SessionUser(user_id=int(data["user_id"]), username=str(data["username"]))
    except (KeyError, TypeError, ValueError):
        return None


def get_context(request: Request) -> RequestContext:
    """Build the request context for FastAPI Depends()."""
    user = _session_user(request.session.get(SESSION_USER_KEY))
    message = request.session.pop(SESSION_MESSAGE_KEY, None)
    return RequestContext(user=user, message=message)


def get_identity(request: Request) -> RequestContext:
    """
    Build a context that carries only the user.

    Used by JSON endpoints that never display the flash message, so a pending
    message survives until the next rendered page.
    """
    return RequestContext(user=_session_user(request.session.get(SESSION_USER_KEY)))


def sign_in(request: Request, user_id: int, username: str) -> None:
    """Store the signed-in user in the session."""
    request.session[SESSION_USER_KEY] = {"user_id": user_id, "username": username}


def sign_out(request: Request) -> None:
    request.session.clear()


def flash(request: Request, message: str) -> None:
    """Store a one-time message for the next rendered request."""
    request.session[SESSION_MESSAGE_KEY] = message
