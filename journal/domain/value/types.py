"""Domain value objects for the journal.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for everything accepted at the write boundary.
"""

import re
from enum import Enum

from pydantic import field_validator

from journal.domain.value.common import RootValueObject, ValueObject

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MAX_CONTENT_LENGTH = 2000
MAX_AUTHOR_LENGTH = 100
MAX_EMAIL_LENGTH = 254


class CommentStatus(str, Enum):
    """Moderation status filter for comment views."""

    ALL = "all"
    PENDING = "pending"
    APPROVED = "approved"

    def matches(self, approved: bool) -> bool:
        """Check whether a comment with the given approval passes the filter."""
        if self is CommentStatus.PENDING:
            return not approved
        if self is CommentStatus.APPROVED:
            return approved
        return True


class PostSlug(RootValueObject[str]):
    """Identifier of a blog post (its markdown file name without extension).

    Examples: 'sourdough-starter', 'Weeknight_Curry', 'pasta.v2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > 200:
            raise ValueError("Post slug must be 1-200 characters")
        if not re.match(r"^[A-Za-z0-9][A-Za-z0-9._-]*$", v):
            raise ValueError(
                "Post slug must start with a letter or digit and contain only "
                "letters, digits, dots, underscores and hyphens"
            )
        return v


class AuthorName(RootValueObject[str]):
    """Display name of a comment author."""

    @field_validator("root")
    @classmethod
    def validate_author(cls, v: str) -> str:
        """Trim and check the author name length."""
        v = v.strip()
        if len(v) < 1:
            raise ValueError("Author name is required")
        if len(v) > MAX_AUTHOR_LENGTH:
            raise ValueError(
                f"Author name is too long (max {MAX_AUTHOR_LENGTH} characters)"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, stored lower-cased. Never shown to other visitors."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate the address."""
        v = v.strip().lower()
        if len(v) > MAX_EMAIL_LENGTH:
            raise ValueError("Email address is too long")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v


class ModeratorSession(ValueObject):
    """Capability proving the caller passed the moderator session check.

    Moderator-only use cases take this value explicitly instead of looking
    at request cookies themselves.
    """

    moderator: str
    token_expires_at: int  # Unix timestamp
