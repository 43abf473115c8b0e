"""Content repository infrastructure providers."""

from dishka import Scope, provide

from journal.adapter.github import RealGitHubContentClient
from journal.config import ContentSettings
from journal.domain.service import ContentClient
from journal.util.di.base import ProviderBase


class ContentProvider(ProviderBase):
    """Content repository component base."""

    __mock_component__ = "content"


class ProdContentProvider(ContentProvider):
    """Production content provider reading posts from GitHub."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_content_client(self, settings: ContentSettings) -> ContentClient:
        """Provide GitHub content client.

        APP-scoped so the posts cache is shared across requests.
        """
        return RealGitHubContentClient(settings=settings)
