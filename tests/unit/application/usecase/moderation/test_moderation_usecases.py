"""Unit tests for moderation use cases."""

from uuid import uuid4

import pytest

from journal.application.usecase.moderation import (
    ApproveCommentRequest,
    ApproveCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListAllCommentsUseCase,
    ListCommentsUseCase,
    ModerationViewRequest,
    PreviewDeleteRequest,
    PreviewDeleteUseCase,
    ReplyToCommentRequest,
    ReplyToCommentUseCase,
)
from journal.application.usecase.moderation.view import build_moderation_view
from journal.domain.error import (
    ConfirmationRequiredError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from journal.domain.repository import CommentRepository
from journal.domain.value import CommentStatus, ModeratorSession
from tests.conftest import cid, make_comment, make_reply_chain
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

SESSION = ModeratorSession(moderator="DigitalAxis", token_expires_at=4102444800)


async def seed(unit_env, comments):
    comment_repo = await unit_env.get(CommentRepository)
    for comment in comments:
        await comment_repo.save(comment)
    return comment_repo


class TestModeratorGate:
    """Every moderation use case refuses to run without a session."""

    @pytest.mark.asyncio
    async def test_list_requires_session(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(ModerationViewRequest(), None)

    @pytest.mark.asyncio
    async def test_list_all_requires_session(self, unit_env):
        use_case = await unit_env.get(ListAllCommentsUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(None)

    @pytest.mark.asyncio
    async def test_approve_requires_session(self, unit_env):
        """Nothing changes when the gate refuses."""
        comment_repo = await seed(unit_env, [make_comment(1, approved=False)])
        use_case = await unit_env.get(ApproveCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(ApproveCommentRequest(comment_id=str(cid(1))), None)

        assert (await comment_repo.find_by_id(cid(1))).approved is False

    @pytest.mark.asyncio
    async def test_reply_requires_session(self, unit_env):
        comment_repo = await seed(unit_env, [make_comment(1)])
        use_case = await unit_env.get(ReplyToCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ReplyToCommentRequest(comment_id=str(cid(1)), content="Hi"), None
            )

        assert len(await comment_repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_delete_requires_session(self, unit_env):
        comment_repo = await seed(unit_env, [make_comment(1)])
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(cid(1)), confirmed=True), None
            )

        assert comment_repo.delete_calls == []

    @pytest.mark.asyncio
    async def test_preview_requires_session(self, unit_env):
        use_case = await unit_env.get(PreviewDeleteUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(PreviewDeleteRequest(comment_id=str(cid(1))), None)


class TestListComments:
    """Tests for the dashboard view."""

    @pytest.mark.asyncio
    async def test_pending_view_with_counts(self, unit_env):
        """Filtered tree plus global pending/approved counts."""
        await seed(
            unit_env,
            [
                make_comment(1, approved=True, minutes=0),
                make_comment(2, parent_id=1, approved=False, minutes=1),
                make_comment(3, approved=False, minutes=2, post_slug="weeknight-curry"),
            ],
        )
        use_case = await unit_env.get(ListCommentsUseCase)

        view = await use_case.execute(
            ModerationViewRequest(status=CommentStatus.PENDING), SESSION
        )

        assert view.total == 2
        assert view.pending_count == 2
        assert view.approved_count == 1
        # Newest first; comment 2 is a pseudo-root since its parent is approved
        assert [n.comment.id for n in view.comments] == [str(cid(3)), str(cid(2))]
        assert all(n.depth == 0 for n in view.comments)
        assert view.comments[0].comment.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_post_filter(self, unit_env):
        await seed(
            unit_env,
            [
                make_comment(1, post_slug="sourdough-starter"),
                make_comment(2, post_slug="weeknight-curry", minutes=1),
            ],
        )
        use_case = await unit_env.get(ListCommentsUseCase)

        view = await use_case.execute(
            ModerationViewRequest(post_slug="weeknight-curry"), SESSION
        )

        assert [n.comment.id for n in view.comments] == [str(cid(2))]
        assert view.total == 1

    @pytest.mark.asyncio
    async def test_list_all_is_flat_and_newest_first(self, unit_env):
        await seed(
            unit_env,
            [make_comment(1, minutes=0), make_comment(2, parent_id=1, minutes=3)],
        )
        use_case = await unit_env.get(ListAllCommentsUseCase)

        response = await use_case.execute(SESSION)

        assert [c.id for c in response.comments] == [str(cid(2)), str(cid(1))]
        assert response.total == 2

    def test_long_reply_chain_view_serializes(self):
        """The dashboard view of a 1,200 reply chain stays serializable."""
        comments = list(reversed(make_reply_chain(1200)))

        view = build_moderation_view(comments, ModerationViewRequest())

        assert view.total == 1200
        assert str(cid(1200)) in view.model_dump_json()


class TestApproveComment:
    """Tests for ApproveCommentUseCase."""

    @pytest.mark.asyncio
    async def test_approve_refetches_view(self, unit_env):
        """The response view reflects the store after the approval."""
        await seed(unit_env, [make_comment(1, approved=False)])
        use_case = await unit_env.get(ApproveCommentUseCase)

        response = await use_case.execute(
            ApproveCommentRequest(
                comment_id=str(cid(1)),
                view=ModerationViewRequest(status=CommentStatus.PENDING),
            ),
            SESSION,
        )

        assert response.comment.approved is True
        assert response.view.status == CommentStatus.PENDING
        assert response.view.comments == []
        assert response.view.pending_count == 0

    @pytest.mark.asyncio
    async def test_approve_twice(self, unit_env):
        await seed(unit_env, [make_comment(1, approved=True)])
        use_case = await unit_env.get(ApproveCommentUseCase)
        request = ApproveCommentRequest(comment_id=str(cid(1)))

        await use_case.execute(request, SESSION)
        response = await use_case.execute(request, SESSION)

        assert response.comment.approved is True

    @pytest.mark.asyncio
    async def test_approve_unknown(self, unit_env):
        use_case = await unit_env.get(ApproveCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ApproveCommentRequest(comment_id=str(uuid4())), SESSION
            )


class TestReplyToComment:
    """Tests for ReplyToCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_defaults_to_session_moderator(self, unit_env):
        await seed(unit_env, [make_comment(1)])
        use_case = await unit_env.get(ReplyToCommentUseCase)

        response = await use_case.execute(
            ReplyToCommentRequest(comment_id=str(cid(1)), content="Thanks!"), SESSION
        )

        assert response.reply.author == "DigitalAxis"
        assert response.reply.is_admin is True
        assert response.reply.parent_id == str(cid(1))
        # The refetched view nests the reply under the comment
        root = response.view.comments[0]
        assert [n.comment.id for n in root.children] == [response.reply.id]

    @pytest.mark.asyncio
    async def test_explicit_author(self, unit_env):
        await seed(unit_env, [make_comment(1)])
        use_case = await unit_env.get(ReplyToCommentUseCase)

        response = await use_case.execute(
            ReplyToCommentRequest(
                comment_id=str(cid(1)), content="Thanks!", author="Guest Editor"
            ),
            SESSION,
        )

        assert response.reply.author == "Guest Editor"

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_flattened(self, unit_env):
        await seed(
            unit_env,
            [make_comment(1), make_comment(2, parent_id=1, author="Bob", minutes=1)],
        )
        use_case = await unit_env.get(ReplyToCommentUseCase)

        response = await use_case.execute(
            ReplyToCommentRequest(comment_id=str(cid(2)), content="@Bob yes"), SESSION
        )

        assert response.reply.parent_id == str(cid(1))
        assert response.reply.mentioned_user == "Bob"

    @pytest.mark.asyncio
    async def test_empty_reply_is_rejected(self, unit_env):
        comment_repo = await seed(unit_env, [make_comment(1)])
        use_case = await unit_env.get(ReplyToCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                ReplyToCommentRequest(comment_id=str(cid(1)), content="  "), SESSION
            )

        assert len(await comment_repo.find_all()) == 1


class TestDeleteComment:
    """Tests for preview and delete."""

    def thread(self):
        return [
            make_comment(1, minutes=0),
            make_comment(2, parent_id=1, minutes=1),
            make_comment(3, parent_id=1, minutes=2),
            make_comment(4, parent_id=2, minutes=3),
        ]

    @pytest.mark.asyncio
    async def test_preview(self, unit_env):
        await seed(unit_env, self.thread())
        use_case = await unit_env.get(PreviewDeleteUseCase)

        preview = await use_case.execute(
            PreviewDeleteRequest(comment_id=str(cid(1))), SESSION
        )

        assert preview.reply_count == 3
        assert preview.is_root is True
        assert preview.requires_confirmation is True

    @pytest.mark.asyncio
    async def test_preview_unknown(self, unit_env):
        use_case = await unit_env.get(PreviewDeleteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(PreviewDeleteRequest(comment_id=str(uuid4())), SESSION)

    @pytest.mark.asyncio
    async def test_unconfirmed_delete_with_replies_is_refused(self, unit_env):
        """Nothing is deleted until the moderator confirms."""
        comment_repo = await seed(unit_env, self.thread())
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(ConfirmationRequiredError) as exc_info:
            await use_case.execute(DeleteCommentRequest(comment_id=str(cid(1))), SESSION)

        assert exc_info.value.reply_count == 3
        assert comment_repo.delete_calls == []

    @pytest.mark.asyncio
    async def test_confirmed_delete_cascades(self, unit_env):
        comment_repo = await seed(unit_env, self.thread())
        use_case = await unit_env.get(DeleteCommentUseCase)

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(cid(1)), confirmed=True), SESSION
        )

        assert comment_repo.delete_calls == [cid(4), cid(2), cid(3), cid(1)]
        assert response.deleted_count == 4
        assert response.reply_count == 3
        assert response.message == "Comment and 3 replies deleted"
        assert response.view.comments == []
        assert response.view.total == 0

    @pytest.mark.asyncio
    async def test_leaf_delete_needs_no_confirmation(self, unit_env):
        await seed(unit_env, self.thread())
        use_case = await unit_env.get(DeleteCommentUseCase)

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(cid(4))), SESSION
        )

        assert response.message == "Comment deleted"
        assert response.view.total == 3

    @pytest.mark.asyncio
    async def test_delete_unknown(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(uuid4()), confirmed=True), SESSION
            )
