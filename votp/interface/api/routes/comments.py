"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status
from pydantic import BaseModel

from votp.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRepliesRequest,
    GetCommentRepliesResponse,
    GetCommentRepliesUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    SearchCommentsRequest,
    SearchCommentsResponse,
    SearchCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from votp.domain.error import (
    AuthenticationRequiredError,
    CommentError,
    EmptySearchTermError,
    InvalidUrlError,
    NotFoundOrForbiddenError,
    ParentNotFoundError,
)
from votp.domain.value import SortOrder

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


def bearer_token(authorization: str | None) -> str | None:
    """Extract the credential from an Authorization header.

    Args:
        authorization: Raw header value, e.g. "Bearer <token>"

    Returns:
        The token, or None if the header is missing or not a bearer header
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    url: str
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    url: str = Query(...),
    order: SortOrder = Query(default=SortOrder.ASC),
) -> GetCommentsResponse:
    """Get all comments on the page a URL refers to.

    Args:
        get_comments_use_case: Get comments use case from DI
        url: Page URL (any variant)
        order: Creation time ordering

    Returns:
        Comments on the page

    Raises:
        HTTPException: If the URL cannot be parsed
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(url=url, order=order)
        )
    except InvalidUrlError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/search", response_model=SearchCommentsResponse)
async def search_comments(
    search_comments_use_case: FromDishka[SearchCommentsUseCase],
    q: str = Query(...),
    limit: int | None = Query(default=None, ge=1),
) -> SearchCommentsResponse:
    """Search comment content across all pages.

    Args:
        search_comments_use_case: Search use case from DI
        q: Search term
        limit: Maximum number of results (capped server-side)

    Returns:
        Matching comments, newest first
    """
    try:
        return await search_comments_use_case.execute(
            SearchCommentsRequest(term=q, limit=limit)
        )
    except EmptySearchTermError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a page or reply to another comment.

    Requires a bearer token.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        authorization: Authorization header

    Returns:
        Created comment

    Raises:
        HTTPException: If not authenticated, the parent is missing, or
            validation fails
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                auth_token=bearer_token(authorization),
                content=request.content,
                url=request.url,
                parent_id=request.parent_id,
            )
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except ParentNotFoundError as e:
        logfire.warn("Reply to missing parent rejected", parent_id=e.parent_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (CommentError, ValueError) as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        ) from e


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's content.

    Only the comment author can edit.

    Args:
        comment_id: Comment UUID
        request: Update data
        update_comment_use_case: Update comment use case from DI
        authorization: Authorization header

    Returns:
        Updated comment

    Raises:
        HTTPException: If not authenticated, not found or not owned, or
            validation fails
    """
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                auth_token=bearer_token(authorization),
                comment_id=comment_id,
                content=request.content,
            )
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotFoundOrForbiddenError as e:
        logfire.warn("Comment update rejected", comment_id=e.comment_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (CommentError, ValueError) as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update comment",
        ) from e


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies.

    Only the comment author can delete.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        authorization: Authorization header

    Returns:
        Deletion confirmation

    Raises:
        HTTPException: If not authenticated or not found or not owned
    """
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                auth_token=bearer_token(authorization), comment_id=comment_id
            )
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotFoundOrForbiddenError as e:
        logfire.warn("Comment deletion rejected", comment_id=e.comment_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        ) from e


@router.get("/{comment_id}/replies", response_model=GetCommentRepliesResponse)
async def get_comment_replies(
    comment_id: str,
    get_comment_replies_use_case: FromDishka[GetCommentRepliesUseCase],
) -> GetCommentRepliesResponse:
    """Get the direct replies to a comment, oldest first."""
    try:
        return await get_comment_replies_use_case.execute(
            GetCommentRepliesRequest(comment_id=comment_id)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
