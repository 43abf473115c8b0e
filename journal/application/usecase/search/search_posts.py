"""Search posts use case."""

from pydantic import BaseModel

from journal.domain.service import ContentService


class SearchPostsRequest(BaseModel):
    """Search request."""

    query: str = ""


class PostItem(BaseModel):
    """Post in search results."""

    slug: str
    title: str
    excerpt: str | None
    date: str
    author: str | None
    tags: list[str]
    image: str | None


class SearchPostsUseCase:
    """Use case for full-text-ish post search."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize search use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: SearchPostsRequest) -> list[PostItem]:
        """Execute search flow.

        Returns:
            Matching posts, newest first; empty for a blank query

        Raises:
            ContentNotConfiguredError: If the content repository is not configured
            ContentUnavailableError: If the content repository cannot be read
        """
        posts = await self.content_service.search_posts(request.query)
        return [
            PostItem(
                slug=post.slug,
                title=post.title,
                excerpt=post.excerpt,
                date=post.date,
                author=post.author,
                tags=post.tags,
                image=post.image,
            )
            for post in posts
        ]
