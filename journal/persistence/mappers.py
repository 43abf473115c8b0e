"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped manually
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from journal.domain.model import Comment, Subscriber
from journal.domain.value import (
    AuthorName,
    CommentId,
    Email,
    PostSlug,
    SubscriberId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_slug=PostSlug(row["post_slug"]),
        author=AuthorName(row["author"]),
        email=Email(row["email"]) if row.get("email") else None,
        content=row["content"],
        created_at=row["created_at"],
        approved=row["approved"],
        is_admin=row["is_admin"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        mentioned_user=row.get("mentioned_user"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_subscriber(row: Dict[str, Any]) -> Subscriber:
    """Convert database row to Subscriber domain model.

    Args:
        row: Database row as dict

    Returns:
        Subscriber domain model
    """
    return Subscriber(
        id=SubscriberId(_uuid(row["id"])),
        email=Email(row["email"]),
        subscribed_at=row["subscribed_at"],
        source=row["source"],
        verified=row["verified"],
        unsubscribed=row["unsubscribed"],
    )


def subscriber_to_dict(subscriber: Subscriber) -> Dict[str, Any]:
    """Convert Subscriber domain model to database dict.

    Args:
        subscriber: Subscriber domain model

    Returns:
        Dict suitable for database insertion
    """
    return subscriber.model_dump()
