"""Domain layer DI providers."""

from dishka import Scope, provide

from journal.config import AuthSettings, ModerationSettings
from journal.domain.repository import CommentRepository, SubscriberRepository
from journal.domain.service import (
    CommentService,
    ContentClient,
    ContentService,
    SessionService,
    SubscriberService,
)
from journal.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_subscriber_service(
        self, subscriber_repository: SubscriberRepository
    ) -> SubscriberService:
        """Provide subscriber domain service."""
        return SubscriberService(subscriber_repository=subscriber_repository)

    @provide
    def get_content_service(self, content_client: ContentClient) -> ContentService:
        """Provide content domain service."""
        return ContentService(content_client=content_client)

    @provide
    def get_session_service(
        self, auth_settings: AuthSettings, moderation_settings: ModerationSettings
    ) -> SessionService:
        """Provide moderator session service."""
        return SessionService(
            auth_settings=auth_settings,
            moderator_name=moderation_settings.moderator_name,
        )
