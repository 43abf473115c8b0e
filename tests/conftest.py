"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta
from uuid import UUID, uuid4

# Settings are read from the environment when the container first builds them
os.environ["ENVIRONMENT"] = "test"
os.environ["AUTH__ADMIN_PASSWORD"] = "test-admin-password"
os.environ["AUTH__JWT_SECRET"] = "test-jwt-secret-with-at-least-32-bytes!"
os.environ["MODERATION__MODERATOR_NAME"] = "DigitalAxis"

import logfire  # noqa: E402

from journal.domain.model import Comment  # noqa: E402
from journal.domain.value import CommentId  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2025, 3, 1, 12, 0, 0)


def make_comment(
    comment_id: UUID | int | None = None,
    parent_id: UUID | int | None = None,
    post_slug: str = "sourdough-starter",
    approved: bool = True,
    author: str = "Alice",
    content: str = "Lovely recipe",
    minutes: int = 0,
    is_admin: bool = False,
    email: str | None = "alice@example.com",
) -> Comment:
    """Helper to build comments with short readable ids.

    Integer ids map to fixed UUIDs so that ``make_comment(2, parent_id=1)``
    reads like the thread it describes.

    Args:
        comment_id: UUID, small integer, or None for a random id
        parent_id: Parent UUID or small integer, None for a top-level comment
        post_slug: Post the comment belongs to
        approved: Moderation state
        author: Display name
        content: Comment text
        minutes: Offset from a fixed base time, orders creation
        is_admin: Whether the comment is a moderator reply
        email: Private contact address

    Returns:
        Comment entity
    """
    return Comment(
        id=cid(comment_id) if comment_id is not None else CommentId(uuid4()),
        post_slug=post_slug,
        author=author,
        email=email,
        content=content,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        approved=approved,
        is_admin=is_admin,
        parent_id=cid(parent_id) if parent_id is not None else None,
    )


def cid(value: UUID | int) -> CommentId:
    """Comment id from a UUID or a small integer."""
    if isinstance(value, int):
        return CommentId(UUID(int=value))
    return CommentId(value)


def make_reply_chain(length: int) -> list[Comment]:
    """Comments 1..length where each one replies to the previous, oldest first."""
    return [
        make_comment(i, parent_id=i - 1 if i > 1 else None, minutes=i)
        for i in range(1, length + 1)
    ]
