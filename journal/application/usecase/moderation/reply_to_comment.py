"""Moderator reply use case."""

from uuid import UUID

from pydantic import BaseModel

from journal.application.usecase.base import require_moderator
from journal.application.usecase.comment.items import CommentItem
from journal.application.usecase.moderation.view import (
    ModerationViewRequest,
    ModerationViewResponse,
    load_moderation_view,
)
from journal.domain.service import CommentService
from journal.domain.value import CommentId, ModeratorSession


class ReplyToCommentRequest(BaseModel):
    """Moderator reply request."""

    comment_id: str  # Comment being replied to
    content: str
    author: str | None = None  # Defaults to the session's moderator name
    view: ModerationViewRequest = ModerationViewRequest()


class ReplyToCommentResponse(BaseModel):
    """Moderator reply response with the refreshed dashboard."""

    reply: CommentItem
    view: ModerationViewResponse


class ReplyToCommentUseCase:
    """Use case for replying to a comment as moderator."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize reply use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self,
        request: ReplyToCommentRequest,
        session: ModeratorSession | None,
    ) -> ReplyToCommentResponse:
        """Execute moderator reply flow.

        Args:
            request: Target comment, reply text and optional author
            session: Moderator capability

        Returns:
            Created reply and the re-queried moderation view

        Raises:
            NotAuthorizedError: If no moderator session was given
            NotFoundError: If the target comment does not exist
            ValidationError: If the reply content is invalid
        """
        moderator = require_moderator(session, "reply as moderator")

        reply = await self.comment_service.reply_as_moderator(
            target_id=CommentId(UUID(request.comment_id)),
            author=(request.author or "").strip() or moderator.moderator,
            content=request.content,
        )
        view = await load_moderation_view(self.comment_service, request.view)

        return ReplyToCommentResponse(
            reply=CommentItem.from_domain(reply, include_email=True),
            view=view,
        )
