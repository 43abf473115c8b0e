"""Moderation dashboard routes.

Every route resolves the session cookie into a moderator capability and
passes it to the use case, which refuses to run without one. Mutating routes
answer with the re-queried dashboard view for the filters given in the query
string, so the client never patches its own copy.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import BaseModel

from journal.application.usecase.moderation import (
    ApproveCommentRequest,
    ApproveCommentResponse,
    ApproveCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListAllCommentsResponse,
    ListAllCommentsUseCase,
    ListCommentsUseCase,
    ModerationViewRequest,
    ModerationViewResponse,
    PreviewDeleteRequest,
    PreviewDeleteResponse,
    PreviewDeleteUseCase,
    ReplyToCommentRequest,
    ReplyToCommentResponse,
    ReplyToCommentUseCase,
)
from journal.application.usecase.subscriber import (
    ListSubscribersResponse,
    ListSubscribersUseCase,
)
from journal.domain.error import (
    ConfirmationRequiredError,
    NotAuthorizedError,
    NotFoundError,
    StoreUnavailableError,
)
from journal.domain.service import SessionService
from journal.domain.value import CommentStatus
from journal.interface.api.session import current_session

router = APIRouter(prefix="/admin", tags=["moderation"], route_class=DishkaRoute)


class ReplyAPIRequest(BaseModel):
    """API request for a moderator reply."""

    content: str
    author: str | None = None  # Defaults to the configured moderator name


def _view(status_filter: CommentStatus, post: str | None) -> ModerationViewRequest:
    return ModerationViewRequest(status=status_filter, post_slug=post or None)


def _unauthorized(e: NotAuthorizedError) -> HTTPException:
    logfire.warn("Moderator action without session", error=str(e))
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=str(e),
    )


@router.get("/comments", response_model=ModerationViewResponse)
async def list_comments(
    request: Request,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    session_service: FromDishka[SessionService],
    status_filter: CommentStatus = Query(default=CommentStatus.ALL, alias="status"),
    post: str | None = Query(default=None),
) -> ModerationViewResponse:
    """Get the filtered comment tree for the dashboard.

    Args:
        status_filter: ``all``, ``pending`` or ``approved``
        post: Optional post slug

    Raises:
        HTTPException: 401 without a moderator session
    """
    session = current_session(request, session_service)
    try:
        return await list_comments_use_case.execute(_view(status_filter, post), session)
    except NotAuthorizedError as e:
        raise _unauthorized(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/comments/all", response_model=ListAllCommentsResponse)
async def list_all_comments(
    request: Request,
    list_all_comments_use_case: FromDishka[ListAllCommentsUseCase],
    session_service: FromDishka[SessionService],
) -> ListAllCommentsResponse:
    """Get every comment as a flat list, newest first.

    Raises:
        HTTPException: 401 without a moderator session
    """
    session = current_session(request, session_service)
    try:
        return await list_all_comments_use_case.execute(session)
    except NotAuthorizedError as e:
        raise _unauthorized(e)


@router.post("/comments/{comment_id}/approve", response_model=ApproveCommentResponse)
async def approve_comment(
    comment_id: str,
    request: Request,
    approve_comment_use_case: FromDishka[ApproveCommentUseCase],
    session_service: FromDishka[SessionService],
    status_filter: CommentStatus = Query(default=CommentStatus.ALL, alias="status"),
    post: str | None = Query(default=None),
) -> ApproveCommentResponse:
    """Approve a comment. Approving an approved comment is a no-op.

    Raises:
        HTTPException: 401 without a session, 404 for an unknown comment
    """
    session = current_session(request, session_service)
    try:
        use_case_request = ApproveCommentRequest(
            comment_id=comment_id, view=_view(status_filter, post)
        )
        return await approve_comment_use_case.execute(use_case_request, session)
    except NotAuthorizedError as e:
        raise _unauthorized(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreUnavailableError:
        raise
    except Exception as e:
        logfire.error("Unexpected error approving comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to approve comment",
        )


@router.post(
    "/comments/{comment_id}/replies",
    response_model=ReplyToCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: str,
    body: ReplyAPIRequest,
    request: Request,
    reply_use_case: FromDishka[ReplyToCommentUseCase],
    session_service: FromDishka[SessionService],
    status_filter: CommentStatus = Query(default=CommentStatus.ALL, alias="status"),
    post: str | None = Query(default=None),
) -> ReplyToCommentResponse:
    """Reply to a comment as moderator.

    Replies to a reply attach to that reply's parent and mention its author.

    Raises:
        HTTPException: 401 without a session, 404 for an unknown comment,
            400 for invalid content
    """
    session = current_session(request, session_service)
    try:
        use_case_request = ReplyToCommentRequest(
            comment_id=comment_id,
            content=body.content,
            author=body.author,
            view=_view(status_filter, post),
        )
        return await reply_use_case.execute(use_case_request, session)
    except NotAuthorizedError as e:
        raise _unauthorized(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreUnavailableError:
        raise
    except Exception as e:
        logfire.error("Unexpected error replying to comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to post reply",
        )


@router.get(
    "/comments/{comment_id}/delete-preview", response_model=PreviewDeleteResponse
)
async def preview_delete(
    comment_id: str,
    request: Request,
    preview_delete_use_case: FromDishka[PreviewDeleteUseCase],
    session_service: FromDishka[SessionService],
) -> PreviewDeleteResponse:
    """Count the replies a delete would remove and get the confirmation prompt.

    Raises:
        HTTPException: 401 without a session, 404 for an unknown comment
    """
    session = current_session(request, session_service)
    try:
        return await preview_delete_use_case.execute(
            PreviewDeleteRequest(comment_id=comment_id), session
        )
    except NotAuthorizedError as e:
        raise _unauthorized(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    session_service: FromDishka[SessionService],
    confirm: bool = Query(default=False),
    status_filter: CommentStatus = Query(default=CommentStatus.ALL, alias="status"),
    post: str | None = Query(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and every reply under it.

    A comment with replies is only deleted with ``confirm=true``; without it
    the response is 409 carrying the reply count and confirmation prompt.

    Raises:
        HTTPException: 401 without a session, 404 for an unknown comment,
            409 when confirmation is required
    """
    session = current_session(request, session_service)
    try:
        use_case_request = DeleteCommentRequest(
            comment_id=comment_id,
            confirmed=confirm,
            view=_view(status_filter, post),
        )
        return await delete_comment_use_case.execute(use_case_request, session)
    except NotAuthorizedError as e:
        raise _unauthorized(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ConfirmationRequiredError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": str(e),
                "commentId": e.comment_id,
                "replyCount": e.reply_count,
            },
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreUnavailableError:
        raise
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )


@router.get("/subscribers", response_model=ListSubscribersResponse)
async def list_subscribers(
    request: Request,
    list_subscribers_use_case: FromDishka[ListSubscribersUseCase],
    session_service: FromDishka[SessionService],
) -> ListSubscribersResponse:
    """List newsletter subscribers, newest first.

    Raises:
        HTTPException: 401 without a moderator session
    """
    session = current_session(request, session_service)
    try:
        return await list_subscribers_use_case.execute(session)
    except NotAuthorizedError as e:
        raise _unauthorized(e)
