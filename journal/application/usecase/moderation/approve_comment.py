"""Approve comment use case."""

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


class ApproveCommentRequest(BaseModel):
    """Approve comment request."""

    comment_id: str
    view: ModerationViewRequest = ModerationViewRequest()


class ApproveCommentResponse(BaseModel):
    """Approve comment response with the refreshed dashboard."""

    comment: CommentItem
    view: ModerationViewResponse


class ApproveCommentUseCase:
    """Use case for approving a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize approve comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self,
        request: ApproveCommentRequest,
        session: ModeratorSession | None,
    ) -> ApproveCommentResponse:
        """Execute approve flow. Approving twice is harmless.

        Args:
            request: Comment to approve and the dashboard filters to refetch with
            session: Moderator capability

        Returns:
            Approved comment and the re-queried moderation view

        Raises:
            NotAuthorizedError: If no moderator session was given
            NotFoundError: If the comment does not exist
        """
        require_moderator(session, "approve comments")

        comment = await self.comment_service.approve(
            CommentId(UUID(request.comment_id))
        )
        view = await load_moderation_view(self.comment_service, request.view)

        return ApproveCommentResponse(
            comment=CommentItem.from_domain(comment, include_email=True),
            view=view,
        )
