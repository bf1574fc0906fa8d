"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status

from votp.application.usecase.comment import (
    GetUserCommentsRequest,
    GetUserCommentsResponse,
    GetUserCommentsUseCase,
)
from votp.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from votp.domain.error import AuthenticationRequiredError, NotFoundError
from votp.interface.api.routes.comments import bearer_token

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


# Registered before /{user_id} so "me" is not read as an ID
@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the authenticated caller's account.

    Args:
        get_current_user_use_case: Use case from DI
        authorization: Bearer token header

    Returns:
        The caller's account, including email

    Raises:
        HTTPException: 401 if not authenticated, 404 if the account is gone

    Example:
        GET /users/me
        Authorization: Bearer <token>

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "name": "Alice",
            "email": "alice@example.com",
            "created_at": "2025-01-15T12:34:56Z"
        }
    """
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(auth_token=bearer_token(authorization))
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile.

    Args:
        user_id: User UUID
        get_user_profile_use_case: Use case from DI

    Returns:
        Public profile (no email)

    Raises:
        HTTPException: 400 for a malformed ID, 404 if the user does not exist
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{user_id}/comments", response_model=GetUserCommentsResponse)
async def get_user_comments(
    user_id: str,
    get_user_comments_use_case: FromDishka[GetUserCommentsUseCase],
    limit: int | None = Query(default=None, ge=1),
) -> GetUserCommentsResponse:
    """Get a user's most recent comments across all pages.

    Args:
        user_id: User UUID
        get_user_comments_use_case: Use case from DI
        limit: Maximum number of comments (capped server-side)

    Returns:
        Comments by the user, newest first

    Raises:
        HTTPException: If user_id is not a valid UUID
    """
    try:
        return await get_user_comments_use_case.execute(
            GetUserCommentsRequest(user_id=user_id, limit=limit)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
