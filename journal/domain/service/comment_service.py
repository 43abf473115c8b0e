"""Comment domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from journal.domain.error import NotFoundError, ValidationError
from journal.domain.model import Comment
from journal.domain.repository import CommentRepository
from journal.domain.thread import Thread, build_thread, cascade_order, count_replies
from journal.domain.value import AuthorName, CommentId, Email, PostSlug
from journal.domain.value.types import MAX_CONTENT_LENGTH

from .base import Service


def _replies(count: int) -> str:
    return "reply" if count == 1 else "replies"


@dataclass
class DeletePreview:
    """What deleting a comment would take down with it."""

    comment_id: CommentId
    is_root: bool
    reply_count: int

    @property
    def requires_confirmation(self) -> bool:
        """Deleting a comment that has replies must be confirmed."""
        return self.reply_count > 0

    @property
    def message(self) -> str:
        """Confirmation prompt shown to the moderator."""
        n = self.reply_count
        if n == 0:
            return "Delete this comment? This action cannot be undone."
        if self.is_root:
            return (
                "Are you sure you want to delete this comment? "
                f"This will also delete {n} {_replies(n)} in this thread. "
                "This action cannot be undone."
            )
        return (
            f"This comment has {n} {_replies(n)}. "
            "Deleting it will also delete all replies. Continue?"
        )


@dataclass
class DeleteResult:
    """Outcome of a cascading delete."""

    comment_id: CommentId
    deleted: list[CommentId]
    already_gone: list[CommentId]

    @property
    def reply_count(self) -> int:
        """Number of replies removed along with the comment."""
        return len(self.deleted) + len(self.already_gone) - 1

    @property
    def message(self) -> str:
        """Summary shown after the delete."""
        n = self.reply_count
        if n > 0:
            return f"Comment and {n} {_replies(n)} deleted"
        return "Comment deleted"


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    @staticmethod
    def _clean_content(content: str) -> str:
        content = content.strip()
        if not content:
            raise ValidationError("Content is required")
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Content is too long (max {MAX_CONTENT_LENGTH} characters)"
            )
        return content

    @staticmethod
    def _new_comment(**fields) -> Comment:
        """Build a comment, turning field validation errors into domain errors."""
        try:
            return Comment(
                id=CommentId(uuid4()),
                created_at=datetime.now(),
                **fields,
            )
        except PydanticValidationError as e:
            error = e.errors()[0]
            message = str(error.get("ctx", {}).get("error") or error["msg"])
            raise ValidationError(message) from e

    async def submit_comment(
        self,
        post_slug: PostSlug,
        author: str | AuthorName,
        email: str | Email,
        content: str,
        parent_id: CommentId | None = None,
        mentioned_user: str | None = None,
        approved: bool = True,
    ) -> Comment:
        """Create a visitor comment or reply.

        Args:
            post_slug: Post the comment belongs to
            author: Display name
            email: Private contact address
            content: Comment text
            parent_id: Comment being replied to (None for top-level)
            mentioned_user: Author the reply is addressed to
            approved: Whether the comment publishes immediately

        Returns:
            Created comment

        Raises:
            ValidationError: If a field is invalid or the parent belongs to another post
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.submit_comment",
            post_slug=str(post_slug),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = self._clean_content(content)
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_slug=str(post_slug),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_slug != post_slug:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_slug=str(parent.post_slug),
                        target_post_slug=str(post_slug),
                    )
                    raise ValidationError("Parent comment does not belong to this post")

            comment = self._new_comment(
                post_slug=post_slug,
                author=author,
                email=email,
                content=content,
                approved=approved,
                is_admin=False,
                parent_id=parent_id,
                mentioned_user=mentioned_user.strip() if mentioned_user else None,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment submitted",
                comment_id=str(saved.id),
                post_slug=str(post_slug),
                approved=saved.approved,
                is_reply=parent_id is not None,
            )
            return saved

    async def reply_as_moderator(
        self, target_id: CommentId, author: str, content: str
    ) -> Comment:
        """Create a moderator reply to a comment.

        Replying to a top-level comment nests under it. Replying to a reply
        attaches to that reply's parent instead and mentions the reply's
        author, so moderator replies never nest deeper than one level below
        the comment that started the exchange.

        Args:
            target_id: Comment being replied to
            author: Moderator display name
            content: Reply text

        Returns:
            Created reply (approved, marked as admin)

        Raises:
            NotFoundError: If the target comment does not exist
            ValidationError: If the content is invalid
        """
        with logfire.span(
            "comment_service.reply_as_moderator", target_id=str(target_id)
        ):
            content = self._clean_content(content)
            target = await self.comment_repository.find_by_id(target_id)
            if not target:
                logfire.warn("Reply target not found", target_id=str(target_id))
                raise NotFoundError("Comment", str(target_id))

            if target.parent_id is None:
                parent_id = target.id
                mentioned_user = None
            else:
                parent_id = target.parent_id
                mentioned_user = target.author.root

            reply = self._new_comment(
                post_slug=target.post_slug,
                author=author,
                content=content,
                approved=True,
                is_admin=True,
                parent_id=parent_id,
                mentioned_user=mentioned_user,
            )
            saved = await self.comment_repository.save(reply)
            logfire.info(
                "Moderator reply created",
                comment_id=str(saved.id),
                parent_id=str(parent_id),
                flattened=mentioned_user is not None,
            )
            return saved

    async def approve(self, comment_id: CommentId) -> Comment:
        """Approve a comment. Approving an approved comment is a no-op.

        Args:
            comment_id: Comment ID

        Returns:
            The approved comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.approve", comment_id=str(comment_id)):
            updated = await self.comment_repository.set_approved(comment_id)
            if updated is None:
                logfire.warn("Comment not found for approval", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment approved", comment_id=str(comment_id))
            return updated

    async def get_comments_for_post(self, post_slug: PostSlug) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_slug: Post identifier

        Returns:
            Flat comment list
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_slug=str(post_slug)
        ):
            comments = await self.comment_repository.find_by_post(post_slug)
            logfire.info(
                "Comments retrieved for post",
                post_slug=str(post_slug),
                count=len(comments),
            )
            return comments

    async def get_all_comments(self) -> list[Comment]:
        """Get every comment across all posts, newest first."""
        with logfire.span("comment_service.get_all_comments"):
            comments = await self.comment_repository.find_all()
            logfire.info("All comments retrieved", count=len(comments))
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    def preview_delete(
        self, comment: Comment, comments: list[Comment] | Thread
    ) -> DeletePreview:
        """Describe what deleting a comment would remove.

        Args:
            comment: Comment to delete
            comments: Full flat comment set (or its Thread) the comment lives in

        Returns:
            Delete preview with reply count and confirmation prompt
        """
        return DeletePreview(
            comment_id=comment.id,
            is_root=comment.is_root,
            reply_count=count_replies(comment.id, comments),
        )

    async def delete_thread(
        self, comment_id: CommentId, comments: list[Comment] | Thread
    ) -> DeleteResult:
        """Delete a comment together with all of its replies.

        Deletes run one at a time, leaves first, so an interrupted cascade
        leaves at worst orphaned replies, never a reply whose parent was
        removed before it. A record that is already gone (another moderator,
        an earlier partial cascade) counts as deleted and the cascade
        continues. Store failures propagate; there is no rollback.

        Args:
            comment_id: Comment to delete
            comments: Full flat comment set the comment lives in

        Returns:
            Ids actually deleted and ids that were already gone
        """
        with logfire.span("comment_service.delete_thread", comment_id=str(comment_id)):
            thread = comments if isinstance(comments, Thread) else build_thread(comments)
            order = cascade_order(comment_id, thread)

            deleted: list[CommentId] = []
            already_gone: list[CommentId] = []
            for target in order:
                if await self.comment_repository.delete(target):
                    deleted.append(target)
                else:
                    logfire.warn(
                        "Comment already deleted, continuing cascade",
                        comment_id=str(target),
                    )
                    already_gone.append(target)

            logfire.info(
                "Comment thread deleted",
                comment_id=str(comment_id),
                deleted=len(deleted),
                already_gone=len(already_gone),
            )
            return DeleteResult(
                comment_id=comment_id, deleted=deleted, already_gone=already_gone
            )
