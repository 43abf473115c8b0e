"""Preview and delete comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from journal.application.usecase.base import require_moderator
from journal.application.usecase.moderation.view import (
    ModerationViewRequest,
    ModerationViewResponse,
    load_moderation_view,
)
from journal.domain.error import ConfirmationRequiredError, NotFoundError
from journal.domain.service import CommentService
from journal.domain.value import CommentId, ModeratorSession


class PreviewDeleteRequest(BaseModel):
    """Preview delete request."""

    comment_id: str


class PreviewDeleteResponse(BaseModel):
    """What a delete would remove and how to confirm it."""

    comment_id: str
    is_root: bool
    reply_count: int
    requires_confirmation: bool
    message: str


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    confirmed: bool = False  # Required when the comment has replies
    view: ModerationViewRequest = ModerationViewRequest()


class DeleteCommentResponse(BaseModel):
    """Delete comment response with the refreshed dashboard."""

    comment_id: str
    deleted_count: int
    reply_count: int
    message: str
    view: ModerationViewResponse


class PreviewDeleteUseCase:
    """Use case for counting the replies a delete would take down."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize preview delete use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self,
        request: PreviewDeleteRequest,
        session: ModeratorSession | None,
    ) -> PreviewDeleteResponse:
        """Execute preview flow.

        Args:
            request: Comment to preview
            session: Moderator capability

        Returns:
            Reply count and confirmation prompt

        Raises:
            NotAuthorizedError: If no moderator session was given
            NotFoundError: If the comment does not exist
        """
        require_moderator(session, "delete comments")

        comment_id = CommentId(UUID(request.comment_id))
        comments = await self.comment_service.get_all_comments()
        target = next((c for c in comments if c.id == comment_id), None)
        if target is None:
            raise NotFoundError("Comment", request.comment_id)

        preview = self.comment_service.preview_delete(target, comments)
        return PreviewDeleteResponse(
            comment_id=request.comment_id,
            is_root=preview.is_root,
            reply_count=preview.reply_count,
            requires_confirmation=preview.requires_confirmation,
            message=preview.message,
        )


class DeleteCommentUseCase:
    """Use case for deleting a comment and all of its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self,
        request: DeleteCommentRequest,
        session: ModeratorSession | None,
    ) -> DeleteCommentResponse:
        """Execute delete flow.

        Steps:
        1. Fetch every comment (replies may live under any post filter)
        2. Count replies; refuse without confirmation when there are any
        3. Cascade delete, leaves first
        4. Re-query the moderation view

        Args:
            request: Comment to delete, confirmation flag and dashboard filters
            session: Moderator capability

        Returns:
            Delete summary and the re-queried moderation view

        Raises:
            NotAuthorizedError: If no moderator session was given
            NotFoundError: If the comment does not exist
            ConfirmationRequiredError: If the comment has replies and
                ``confirmed`` is not set
        """
        require_moderator(session, "delete comments")

        comment_id = CommentId(UUID(request.comment_id))
        comments = await self.comment_service.get_all_comments()
        target = next((c for c in comments if c.id == comment_id), None)
        if target is None:
            raise NotFoundError("Comment", request.comment_id)

        preview = self.comment_service.preview_delete(target, comments)
        if preview.requires_confirmation and not request.confirmed:
            raise ConfirmationRequiredError(
                request.comment_id, preview.reply_count, preview.message
            )

        result = await self.comment_service.delete_thread(comment_id, comments)
        view = await load_moderation_view(self.comment_service, request.view)

        return DeleteCommentResponse(
            comment_id=request.comment_id,
            deleted_count=len(result.deleted),
            reply_count=result.reply_count,
            message=result.message,
            view=view,
        )
