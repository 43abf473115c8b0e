"""Newsletter routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from journal.application.usecase.subscriber import (
    SubscribeRequest,
    SubscribeResponse,
    SubscribeUseCase,
)
from journal.domain.error import AlreadySubscribedError

router = APIRouter(tags=["newsletter"], route_class=DishkaRoute)


@router.post(
    "/subscribe",
    response_model=SubscribeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def subscribe(
    request: SubscribeRequest,
    subscribe_use_case: FromDishka[SubscribeUseCase],
) -> SubscribeResponse:
    """Join the newsletter.

    Raises:
        HTTPException: 400 on a malformed email, 409 if already subscribed
    """
    try:
        return await subscribe_use_case.execute(request)
    except AlreadySubscribedError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
