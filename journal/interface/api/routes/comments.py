"""Public comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from journal.application.usecase.comment import (
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from journal.domain.error import NotFoundError

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class SubmitCommentAPIRequest(BaseModel):
    """API request for posting a comment.

    Length and format checks happen in the domain so that the visitor gets
    one consistent error message per field.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    author: str
    email: str
    content: str
    parent_id: str | None = None  # Comment being replied to
    mentioned_user: str | None = None


@router.get("/{post_slug}/comments", response_model=GetThreadResponse)
async def get_comments(
    post_slug: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> GetThreadResponse:
    """Get the approved comment thread of a post.

    Raises:
        HTTPException: 400 if the slug is malformed
    """
    try:
        return await get_thread_use_case.execute(GetThreadRequest(post_slug=post_slug))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/{post_slug}/comments",
    response_model=SubmitCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_comment(
    post_slug: str,
    request: SubmitCommentAPIRequest,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
) -> SubmitCommentResponse:
    """Post a comment or reply to a post.

    Raises:
        HTTPException: 400 on invalid input, 404 if the parent comment is gone
    """
    try:
        use_case_request = SubmitCommentRequest(
            post_slug=post_slug,
            author=request.author,
            email=request.email,
            content=request.content,
            parent_id=request.parent_id,
            mentioned_user=request.mentioned_user,
        )
        return await submit_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment submission failed - parent not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
