"""Mock content repository providers for testing."""

from dishka import Scope, provide

from journal.adapter.github import MockGitHubContentClient
from journal.domain.service import ContentClient
from journal.util.di.infrastructure.content import ContentProvider


class MockContentProvider(ContentProvider):
    """Mock content provider serving fixture posts."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_content_client(self) -> ContentClient:
        """Provide mock GitHub content client."""
        return MockGitHubContentClient()
