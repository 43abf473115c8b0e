"""Get public comment thread use case."""

from pydantic import BaseModel

from journal.application.usecase.comment.items import CommentNodeItem
from journal.domain.service import CommentService
from journal.domain.thread import reconcile
from journal.domain.value import CommentStatus, PostSlug


class GetThreadRequest(BaseModel):
    """Get thread request."""

    post_slug: str


class GetThreadResponse(BaseModel):
    """Get thread response."""

    post_slug: str
    comments: list[CommentNodeItem]
    total: int


class GetThreadUseCase:
    """Use case for the public, approved-only comment thread of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get thread use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Comments are fetched oldest first and reconciled with the approved
        filter, so an approved reply under a pending parent still shows up
        as a top-level comment. Emails are never included.

        Args:
            request: Request with the post slug

        Returns:
            Thread nodes and number of visible comments
        """
        post_slug = PostSlug(request.post_slug)
        comments = await self.comment_service.get_comments_for_post(post_slug)
        nodes = reconcile(comments, status=CommentStatus.APPROVED, post_slug=post_slug)

        return GetThreadResponse(
            post_slug=request.post_slug,
            comments=[CommentNodeItem.from_domain(node) for node in nodes],
            total=sum(1 for comment in comments if comment.approved),
        )
