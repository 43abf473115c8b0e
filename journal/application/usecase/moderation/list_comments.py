"""List comments for moderation use cases."""

from pydantic import BaseModel

from journal.application.usecase.base import require_moderator
from journal.application.usecase.comment.items import CommentItem
from journal.application.usecase.moderation.view import (
    ModerationViewRequest,
    ModerationViewResponse,
    load_moderation_view,
)
from journal.domain.service import CommentService
from journal.domain.value import ModeratorSession


class ListAllCommentsResponse(BaseModel):
    """Flat comment list for the dashboard overview."""

    comments: list[CommentItem]
    total: int


class ListCommentsUseCase:
    """Use case for the moderation dashboard comment tree."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self,
        request: ModerationViewRequest,
        session: ModeratorSession | None,
    ) -> ModerationViewResponse:
        """Execute list comments flow.

        Args:
            request: Status and post filters
            session: Moderator capability

        Returns:
            Filtered comment tree, newest first

        Raises:
            NotAuthorizedError: If no moderator session was given
        """
        require_moderator(session, "view comments")
        return await load_moderation_view(self.comment_service, request)


class ListAllCommentsUseCase:
    """Use case for the flat, unfiltered list of every comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize flat comment list use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, session: ModeratorSession | None) -> ListAllCommentsResponse:
        """Execute flat list flow, newest first.

        Raises:
            NotAuthorizedError: If no moderator session was given
        """
        require_moderator(session, "view comments")

        comments = await self.comment_service.get_all_comments()
        return ListAllCommentsResponse(
            comments=[
                CommentItem.from_domain(comment, include_email=True)
                for comment in comments
            ],
            total=len(comments),
        )
