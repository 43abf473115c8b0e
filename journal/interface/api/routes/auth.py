"""Moderator authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel

from journal.config import Settings
from journal.domain.error import NotAuthorizedError
from journal.domain.service import SessionService
from journal.interface.api.session import current_session

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginRequest(BaseModel):
    """Moderator login request."""

    password: str


class LoginResponse(BaseModel):
    """Moderator login response."""

    success: bool
    moderator: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking the moderator session.

    Reports an unauthenticated state without raising an error.
    """

    authenticated: bool
    moderator: str | None = None
    expires_at: int | None = None


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    session_service: FromDishka[SessionService],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in to the authoring panel.

    Sets the HttpOnly session cookie on success.

    Raises:
        HTTPException: 401 if the password is wrong
    """
    try:
        token = session_service.login(request.password)
    except NotAuthorizedError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid password",
        )

    response.set_cookie(
        key=settings.auth.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
        max_age=settings.auth.session_expiry_hours * 60 * 60,
    )
    return LoginResponse(success=True, moderator=session_service.moderator_name)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Log out by clearing the session cookie."""
    response.delete_cookie(
        key=settings.auth.session_cookie_name,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
    )
    logfire.info("Moderator logged out")
    return LogoutResponse(success=True, message="Logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_session_status(
    request: Request,
    session_service: FromDishka[SessionService],
) -> AuthStatusResponse:
    """Check whether the caller holds a valid moderator session."""
    session = current_session(request, session_service)
    if session is None:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(
        authenticated=True,
        moderator=session.moderator,
        expires_at=session.token_expires_at,
    )
