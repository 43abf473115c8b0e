"""initial_schema

Create the schema for the journal:
- Comments (flat records, threaded through parent_id, moderated via approved)
- Subscribers (newsletter list, one row per email)

Revision ID: 3c1f9a7d2e40
Revises:
Create Date: 2025-03-01 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # COMMENTS TABLE
    # ========================================================================
    # No foreign key on parent_id: reply cascades run in the application.
    op.create_table(
        "comments",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("post_slug", sa.String(200), nullable=False),
        sa.Column("parent_id", postgresql.UUID(), nullable=True),
        sa.Column("author", sa.String(100), nullable=False),
        sa.Column("email", sa.String(254), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "approved", sa.Boolean(), nullable=False, server_default=sa.text("true")
        ),
        sa.Column(
            "is_admin", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column("mentioned_user", sa.String(100), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "char_length(content) BETWEEN 1 AND 2000", name="check_comment_content"
        ),
    )
    op.create_index(
        "idx_comments_post_slug_created_at", "comments", ["post_slug", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index(
        "idx_comments_created_at", "comments", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # SUBSCRIBERS TABLE
    # ========================================================================
    op.create_table(
        "subscribers",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("email", sa.String(254), nullable=False, unique=True),
        sa.Column(
            "subscribed_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "source", sa.String(50), nullable=False, server_default="website"
        ),
        sa.Column(
            "verified", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column(
            "unsubscribed",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
    )
    op.create_index(
        "idx_subscribers_subscribed_at",
        "subscribers",
        [sa.text("subscribed_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_subscribers_subscribed_at", table_name="subscribers")
    op.drop_table("subscribers")

    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_post_slug_created_at", table_name="comments")
    op.drop_table("comments")
