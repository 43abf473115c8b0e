"""Moderation dashboard view shared by every moderation use case."""

from pydantic import BaseModel

from journal.application.usecase.comment.items import CommentNodeItem
from journal.domain.model import Comment
from journal.domain.service import CommentService
from journal.domain.thread import reconcile
from journal.domain.value import CommentStatus, PostSlug


class ModerationViewRequest(BaseModel):
    """Filters of the moderation dashboard."""

    status: CommentStatus = CommentStatus.ALL
    post_slug: str | None = None


class ModerationViewResponse(BaseModel):
    """Filtered comment tree for the moderation dashboard."""

    status: CommentStatus
    post_slug: str | None
    comments: list[CommentNodeItem]
    total: int  # Comments passing the filters
    pending_count: int  # Across all posts, regardless of filters
    approved_count: int


def build_moderation_view(
    comments: list[Comment], request: ModerationViewRequest
) -> ModerationViewResponse:
    """Reconcile the full comment set against the dashboard filters.

    Args:
        comments: Every comment, newest first
        request: Active filters

    Returns:
        Moderation view with emails included
    """
    post_slug = PostSlug(request.post_slug) if request.post_slug else None
    nodes = reconcile(comments, status=request.status, post_slug=post_slug)
    total = sum(
        1
        for comment in comments
        if request.status.matches(comment.approved)
        and (post_slug is None or comment.post_slug == post_slug)
    )
    pending = sum(1 for comment in comments if not comment.approved)

    return ModerationViewResponse(
        status=request.status,
        post_slug=request.post_slug,
        comments=[CommentNodeItem.from_domain(node, include_email=True) for node in nodes],
        total=total,
        pending_count=pending,
        approved_count=len(comments) - pending,
    )


async def load_moderation_view(
    comment_service: CommentService, request: ModerationViewRequest
) -> ModerationViewResponse:
    """Re-query every comment and build the dashboard view.

    Args:
        comment_service: Comment domain service
        request: Active filters

    Returns:
        Fresh moderation view
    """
    comments = await comment_service.get_all_comments()
    return build_moderation_view(comments, request)
