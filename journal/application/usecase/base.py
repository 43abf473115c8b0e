"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from journal.domain.error import NotAuthorizedError
from journal.domain.value import ModeratorSession


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def require_moderator(session: ModeratorSession | None, action: str) -> ModeratorSession:
    """Check that a moderator capability was passed in.

    Args:
        session: Capability resolved by the HTTP layer, None for visitors
        action: What the caller is trying to do (used in the error message)

    Returns:
        The session, for callers that need the moderator name

    Raises:
        NotAuthorizedError: If no session was given
    """
    if session is None:
        raise NotAuthorizedError(action)
    return session
