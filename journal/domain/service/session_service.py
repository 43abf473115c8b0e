"""Moderator session domain service."""

import secrets

import logfire

from journal.config import AuthSettings
from journal.domain.error import NotAuthorizedError
from journal.domain.value import ModeratorSession
from journal.util.jwt import JWTError, create_token, verify_token

from .base import Service


class SessionService(Service):
    """Issues and checks moderator session tokens.

    The HTTP layer turns the session cookie into a ``ModeratorSession`` here
    and hands that value to moderator-only use cases.
    """

    def __init__(self, auth_settings: AuthSettings, moderator_name: str) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
            moderator_name: Name recorded in issued sessions
        """
        self.auth_settings = auth_settings
        self.moderator_name = moderator_name

    def login(self, password: str) -> str:
        """Check the admin password and issue a session token.

        Args:
            password: Password submitted by the moderator

        Returns:
            Session token for the session cookie

        Raises:
            NotAuthorizedError: If the password is wrong
        """
        with logfire.span("session_service.login"):
            if not secrets.compare_digest(
                password.encode("utf-8"),
                self.auth_settings.admin_password.encode("utf-8"),
            ):
                logfire.warn("Moderator login rejected")
                raise NotAuthorizedError("log in")
            token = create_token(self.moderator_name, self.auth_settings)
            logfire.info("Moderator session issued", moderator=self.moderator_name)
            return token

    def resolve(self, token: str | None) -> ModeratorSession | None:
        """Turn a session token into a moderator capability.

        Args:
            token: Token from the session cookie (optional)

        Returns:
            ModeratorSession if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.debug("Session token rejected, treating as visitor", error=str(e))
            return None
        return ModeratorSession(moderator=payload.sub, token_expires_at=payload.exp)
