"""Search use cases."""

from .search_posts import PostItem, SearchPostsRequest, SearchPostsUseCase

__all__ = [
    "PostItem",
    "SearchPostsRequest",
    "SearchPostsUseCase",
]
