"""SQLAlchemy table definitions for the journal.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# parent_id has no foreign key: replies may outlive a parent
# removed by another moderator, and cascades are done by the application.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_slug", String(200), nullable=False),
    Column("parent_id", UUID, nullable=True),
    Column("author", String(100), nullable=False),
    Column("email", String(254), nullable=True),  # Private
    Column("content", Text, nullable=False),
    Column("approved", Boolean, nullable=False, server_default="true"),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("mentioned_user", String(100), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_slug_created_at", comments_table.c.post_slug, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at.desc())

# ============================================================================
# SUBSCRIBERS TABLE
# ============================================================================
subscribers_table = Table(
    "subscribers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(254), nullable=False, unique=True),
    Column(
        "subscribed_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("source", String(50), nullable=False, server_default="website"),
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column("unsubscribed", Boolean, nullable=False, server_default="false"),
)

Index("idx_subscribers_subscribed_at", subscribers_table.c.subscribed_at.desc())
