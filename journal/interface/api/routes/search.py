"""Post search routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from journal.application.usecase.search import (
    PostItem,
    SearchPostsRequest,
    SearchPostsUseCase,
)

router = APIRouter(tags=["search"], route_class=DishkaRoute)


@router.get("/search", response_model=list[PostItem])
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    q: str = Query(default=""),
) -> list[PostItem]:
    """Search posts by title, content, excerpt, author or tag.

    Content repository failures are translated by the app-level handlers.
    """
    return await search_posts_use_case.execute(SearchPostsRequest(query=q))
