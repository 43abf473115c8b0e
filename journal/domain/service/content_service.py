"""Content repository domain service."""

from abc import ABC, abstractmethod

import logfire

from journal.domain.model import BlogPost

from .base import Service


class ContentClient(ABC):
    """Port to the hosted content repository holding the markdown posts."""

    @abstractmethod
    async def fetch_posts(self) -> list[BlogPost]:
        """Fetch all published posts, newest first.

        Raises:
            ContentUnavailableError: If the repository cannot be read
        """
        pass


class ContentService(Service):
    """Domain service for reading and searching posts."""

    def __init__(self, content_client: ContentClient) -> None:
        """Initialize content service.

        Args:
            content_client: Content repository client
        """
        self.content_client = content_client

    async def search_posts(self, query: str) -> list[BlogPost]:
        """Search posts by title, body, excerpt, author and tags.

        Args:
            query: Free-text query; blank queries return nothing

        Returns:
            Matching posts in repository order (newest first)
        """
        term = query.strip().lower()
        if not term:
            return []

        with logfire.span("content_service.search_posts", query=term):
            posts = await self.content_client.fetch_posts()
            results = [post for post in posts if post.matches(term)]
            logfire.info(
                "Post search completed", scanned=len(posts), matched=len(results)
            )
            return results
