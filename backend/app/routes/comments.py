"""
Community Board Backend — Comment Route Handlers
==================================================

What:  GET/POST /comments, GET/DELETE /comments/{id}.
Why no PUT: comments cannot be edited, so the route is not registered and
FastAPI answers 405 Method Not Allowed.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.comment import CommentCreate, CommentResponse
from app.schemas.common import ErrorResponse
from app.services.comment_service import comment_service

router = APIRouter(prefix="/comments", tags=["Comments"])


@router.get("", response_model=List[CommentResponse], summary="List all comments")
async def list_comments(
    response: Response,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[CommentResponse]:
    comments = await comment_service.list_comments(db)
    response.headers["X-Total-Count"] = str(len(comments))
    return comments


@router.get(
    "/{comment_id}",
    response_model=CommentResponse,
    responses={404: {"description": "Comment not found", "model": ErrorResponse}},
    summary="Get a single comment by ID",
)
async def get_comment(
    comment_id: int,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> CommentResponse:
    return await comment_service.get_comment(db, comment_id)


@router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "userId or boardId not found", "model": ErrorResponse}},
    summary="Create a comment under a board",
)
async def create_comment(
    payload: CommentCreate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> CommentResponse:
    return await comment_service.create_comment(db, payload)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Comment not found", "model": ErrorResponse}},
    summary="Delete a comment",
)
async def delete_comment(
    comment_id: int,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> Response:
    await comment_service.delete_comment(db, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
