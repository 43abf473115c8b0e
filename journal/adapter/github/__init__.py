"""GitHub content repository adapter."""

from .client import (
    GitHubContentClient,
    MockGitHubContentClient,
    RealGitHubContentClient,
    parse_markdown_post,
)

__all__ = [
    "GitHubContentClient",
    "MockGitHubContentClient",
    "RealGitHubContentClient",
    "parse_markdown_post",
]
