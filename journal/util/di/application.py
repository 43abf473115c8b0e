"""Application layer DI providers."""

from dishka import Scope, provide

from journal.application.usecase.comment import GetThreadUseCase, SubmitCommentUseCase
from journal.application.usecase.moderation import (
    ApproveCommentUseCase,
    DeleteCommentUseCase,
    ListAllCommentsUseCase,
    ListCommentsUseCase,
    PreviewDeleteUseCase,
    ReplyToCommentUseCase,
)
from journal.application.usecase.search import SearchPostsUseCase
from journal.application.usecase.subscriber import (
    ListSubscribersUseCase,
    SubscribeUseCase,
)
from journal.config import ModerationSettings
from journal.domain.service import CommentService, ContentService, SubscriberService
from journal.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Public comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, comment_service: CommentService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self,
        comment_service: CommentService,
        moderation_settings: ModerationSettings,
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(
            comment_service=comment_service,
            moderation_settings=moderation_settings,
        )

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide moderation list use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_all_comments_use_case(
        self, comment_service: CommentService
    ) -> ListAllCommentsUseCase:
        """Provide flat comment list use case."""
        return ListAllCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_approve_comment_use_case(
        self, comment_service: CommentService
    ) -> ApproveCommentUseCase:
        """Provide approve comment use case."""
        return ApproveCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_reply_to_comment_use_case(
        self, comment_service: CommentService
    ) -> ReplyToCommentUseCase:
        """Provide moderator reply use case."""
        return ReplyToCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_preview_delete_use_case(
        self, comment_service: CommentService
    ) -> PreviewDeleteUseCase:
        """Provide delete preview use case."""
        return PreviewDeleteUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Newsletter use cases
    @provide(scope=Scope.REQUEST)
    def get_subscribe_use_case(
        self, subscriber_service: SubscriberService
    ) -> SubscribeUseCase:
        """Provide subscribe use case."""
        return SubscribeUseCase(subscriber_service=subscriber_service)

    @provide(scope=Scope.REQUEST)
    def get_list_subscribers_use_case(
        self, subscriber_service: SubscriberService
    ) -> ListSubscribersUseCase:
        """Provide list subscribers use case."""
        return ListSubscribersUseCase(subscriber_service=subscriber_service)

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self, content_service: ContentService
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(content_service=content_service)
