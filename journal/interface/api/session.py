"""Moderator session resolution for routes."""

from fastapi import Request

from journal.domain.service import SessionService
from journal.domain.value import ModeratorSession


def current_session(
    request: Request, session_service: SessionService
) -> ModeratorSession | None:
    """Resolve the moderator session cookie of a request.

    Args:
        request: Incoming request
        session_service: Session service from DI

    Returns:
        ModeratorSession for a valid cookie, None for visitors
    """
    cookie_name = session_service.auth_settings.session_cookie_name
    return session_service.resolve(request.cookies.get(cookie_name))
