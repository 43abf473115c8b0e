"""GitHub content repository client.

Posts are markdown files in a directory of a GitHub repository, each with an
optional ``---`` frontmatter block. The contents API returns file bodies
base64 encoded.
"""

import base64
import binascii
import re
import time
from datetime import datetime

import httpx
import logfire

from journal.adapter.error import ContentNotConfiguredError, ContentUnavailableError
from journal.config import ContentSettings
from journal.domain.model import BlogPost
from journal.domain.service.content_service import ContentClient

FRONTMATTER_PATTERN = re.compile(r"^---\n([\s\S]*?)\n---\n([\s\S]*)$")


def parse_markdown_post(filename: str, raw: str) -> BlogPost:
    """Parse a markdown file with frontmatter into a BlogPost.

    Args:
        filename: File name, the slug is the name without ``.md``
        raw: Decoded file content

    Returns:
        Parsed post; missing frontmatter keys fall back to defaults
    """
    slug = filename.removesuffix(".md")
    frontmatter: dict[str, str] = {}
    body = raw

    match = FRONTMATTER_PATTERN.match(raw)
    if match:
        body = match.group(2)
        for line in match.group(1).split("\n"):
            key, sep, value = line.partition(":")
            if sep and key.strip():
                frontmatter[key.strip()] = value.strip()

    tags = frontmatter.get("tags")
    return BlogPost(
        slug=slug,
        title=frontmatter.get("title") or slug,
        content=body,
        excerpt=frontmatter.get("excerpt") or re.sub(r"[#*`]", "", body[:160]),
        date=frontmatter.get("date") or datetime.now().isoformat(),
        author=frontmatter.get("author") or "Anonymous",
        tags=[tag.strip() for tag in tags.split(",")] if tags else [],
        image=frontmatter.get("image") or None,
    )


class GitHubContentClient(ContentClient):
    """Base class for GitHub content clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGitHubContentClient(GitHubContentClient):
    """Reads posts through the GitHub contents API.

    The post list is cached in-process for ``cache_ttl_seconds``.
    """

    def __init__(self, settings: ContentSettings) -> None:
        """Initialize GitHub content client.

        Args:
            settings: Content repository settings
        """
        self.settings = settings
        self._cached_posts: list[BlogPost] | None = None
        self._cached_at: float = 0.0

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.github_token}",
            "Accept": "application/vnd.github.v3+json",
        }

    def _contents_url(self, path: str) -> str:
        return (
            f"{self.settings.api_url}/repos/{self.settings.github_owner}/"
            f"{self.settings.github_repo}/contents/{path}"
        )

    def clear_cache(self) -> None:
        """Drop the cached post list."""
        self._cached_posts = None
        self._cached_at = 0.0

    async def fetch_posts(self) -> list[BlogPost]:
        """Fetch all markdown posts, newest first.

        Returns:
            Parsed posts sorted by date descending

        Raises:
            ContentNotConfiguredError: If owner, repo or token is missing
            ContentUnavailableError: If the posts directory cannot be listed
        """
        if not self.settings.is_configured:
            raise ContentNotConfiguredError("GitHub configuration missing")

        age = time.monotonic() - self._cached_at
        if self._cached_posts is not None and age < self.settings.cache_ttl_seconds:
            logfire.debug("GitHub posts cache hit", age_seconds=round(age, 1))
            return self._cached_posts

        with logfire.span(
            "github.fetch_posts",
            owner=self.settings.github_owner,
            repo=self.settings.github_repo,
        ):
            try:
                async with httpx.AsyncClient(headers=self._headers) as client:
                    response = await client.get(
                        self._contents_url(self.settings.posts_dir)
                    )
                    if response.status_code != 200:
                        logfire.error(
                            "Failed to list posts directory",
                            status_code=response.status_code,
                        )
                        raise ContentUnavailableError(
                            f"Posts directory request failed: {response.status_code}"
                        )

                    files = [
                        f
                        for f in response.json()
                        if f.get("type") == "file" and f.get("name", "").endswith(".md")
                    ]

                    posts: list[BlogPost] = []
                    for file in files:
                        post = await self._fetch_post(client, file["name"], file["path"])
                        if post is not None:
                            posts.append(post)
            except httpx.HTTPError as e:
                logfire.error("GitHub HTTP error", error=str(e))
                raise ContentUnavailableError(f"HTTP error fetching posts: {e}")

            posts.sort(key=lambda post: post.date, reverse=True)
            self._cached_posts = posts
            self._cached_at = time.monotonic()
            logfire.info("GitHub posts fetched", count=len(posts))
            return posts

    async def _fetch_post(
        self, client: httpx.AsyncClient, name: str, path: str
    ) -> BlogPost | None:
        """Fetch and parse one post; unreadable files are skipped."""
        response = await client.get(self._contents_url(path))
        if response.status_code != 200:
            logfire.warn(
                "Skipping unreadable post", path=path, status_code=response.status_code
            )
            return None

        try:
            payload = response.json()
            encoded = payload.get("content") if isinstance(payload, dict) else None
            if not isinstance(encoded, str) or not encoded:
                return None
            raw = base64.b64decode(re.sub(r"\s", "", encoded)).decode("utf-8")
        except (ValueError, binascii.Error) as e:
            logfire.warn("Skipping unreadable post", path=path, error=str(e))
            return None

        return parse_markdown_post(name, raw)


class MockGitHubContentClient(GitHubContentClient):
    """Mock content client for testing.

    Returns deterministic posts without making real API calls.
    """

    def __init__(self, posts: list[BlogPost] | None = None) -> None:
        """Initialize mock client with optional fixture posts."""
        self.posts = posts if posts is not None else [
            BlogPost(
                slug="sourdough-starter",
                title="Keeping a Sourdough Starter Alive",
                content="Feed it flour and water every day.",
                excerpt="A starter guide to starters.",
                date="2025-03-02",
                author="DigitalAxis",
                tags=["bread", "fermentation"],
            ),
            BlogPost(
                slug="weeknight-curry",
                title="Weeknight Chickpea Curry",
                content="Onions, garlic, ginger, chickpeas and coconut milk.",
                date="2025-02-14",
                author="DigitalAxis",
                tags=["vegan", "quick"],
            ),
        ]

    async def fetch_posts(self) -> list[BlogPost]:
        """Return the fixture posts."""
        return list(self.posts)
