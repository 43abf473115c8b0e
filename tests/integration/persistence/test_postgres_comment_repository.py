"""Integration tests for the PostgreSQL repositories.

Run against a migrated database: set DATABASE__URL and apply
``scripts/run_migrations.py`` first.
"""

import os
from uuid import uuid4

import pytest

from journal.domain.repository import CommentRepository
from journal.domain.service import CommentService
from journal.domain.value import PostSlug
from tests.conftest import make_comment
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

integration_env = create_env_fixture(unmock={"persistence"})


def unique_slug() -> str:
    return f"integration-{uuid4().hex[:12]}"


class TestPostgresCommentRepository:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        slug = unique_slug()
        comment = make_comment(post_slug=slug)

        await comment_repo.save(comment)
        found = await comment_repo.find_by_id(comment.id)

        assert found is not None
        assert found.post_slug == PostSlug(slug)
        assert found.email == comment.email
        assert found.parent_id is None

    @pytest.mark.asyncio
    async def test_delete_reports_missing_rows(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        comment = make_comment(post_slug=unique_slug())
        await comment_repo.save(comment)

        assert await comment_repo.delete(comment.id) is True
        assert await comment_repo.delete(comment.id) is False

    @pytest.mark.asyncio
    async def test_set_approved(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        comment = make_comment(post_slug=unique_slug(), approved=False)
        await comment_repo.save(comment)

        updated = await comment_repo.set_approved(comment.id)

        assert updated is not None
        assert updated.approved is True
        assert await comment_repo.set_approved(uuid4()) is None

    @pytest.mark.asyncio
    async def test_cascade_delete_keeps_no_descendants(self, integration_env):
        comment_service = await integration_env.get(CommentService)
        comment_repo = await integration_env.get(CommentRepository)
        slug = unique_slug()
        root = make_comment(post_slug=slug, minutes=0)
        child = make_comment(parent_id=root.id, post_slug=slug, minutes=1)
        grandchild = make_comment(parent_id=child.id, post_slug=slug, minutes=2)
        sibling = make_comment(post_slug=slug, minutes=3)
        for comment in (root, child, grandchild, sibling):
            await comment_repo.save(comment)

        comments = await comment_repo.find_by_post(PostSlug(slug))
        result = await comment_service.delete_thread(root.id, comments)

        assert result.deleted == [grandchild.id, child.id, root.id]
        remaining = await comment_repo.find_by_post(PostSlug(slug))
        assert [c.id for c in remaining] == [sibling.id]
