"""Submit visitor comment use case."""

from uuid import UUID

from pydantic import BaseModel

from journal.application.usecase.comment.items import CommentItem
from journal.config import ModerationSettings
from journal.domain.service import CommentService
from journal.domain.value import CommentId, PostSlug


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    post_slug: str
    author: str
    email: str
    content: str
    parent_id: str | None = None  # Comment being replied to
    mentioned_user: str | None = None


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    comment: CommentItem
    published: bool


class SubmitCommentUseCase:
    """Use case for a visitor posting a comment or a reply."""

    def __init__(
        self,
        comment_service: CommentService,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize submit comment use case.

        Args:
            comment_service: Comment domain service
            moderation_settings: Decides whether new comments publish immediately
        """
        self.comment_service = comment_service
        self.moderation_settings = moderation_settings

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Args:
            request: Submit comment request

        Returns:
            Created comment (without email) and whether it is already public

        Raises:
            ValidationError: If a field is invalid or the parent is on another post
            NotFoundError: If the parent comment does not exist
        """
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.comment_service.submit_comment(
            post_slug=PostSlug(request.post_slug),
            author=request.author,
            email=request.email,
            content=request.content,
            parent_id=parent_id,
            mentioned_user=request.mentioned_user,
            approved=self.moderation_settings.auto_approve,
        )

        return SubmitCommentResponse(
            comment=CommentItem.from_domain(comment),
            published=comment.approved,
        )
