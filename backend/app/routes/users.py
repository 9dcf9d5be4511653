"""
Community Board Backend — User Route Handlers
===============================================

What:  GET/POST /users, GET/PUT/DELETE /users/{id}.
How:   Each handler receives the request's AsyncSession, delegates to
       UserService and picks the status code. No business logic here.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.user_service import user_service

router = APIRouter(prefix="/users", tags=["Users"])

NOT_FOUND = {404: {"description": "User not found", "model": ErrorResponse}}


@router.get("", response_model=List[UserResponse], summary="List all users")
async def list_users(
    response: Response,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[UserResponse]:
    users = await user_service.list_users(db)
    response.headers["X-Total-Count"] = str(len(users))
    return users


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=NOT_FOUND,
    summary="Get a single user by ID",
)
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> UserResponse:
    return await user_service.get_user(db, user_id)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"description": "Duplicate email or store failure", "model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> UserResponse:
    return await user_service.create_user(db, payload)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses=NOT_FOUND,
    summary="Replace a user's name and email",
)
async def update_user(
    user_id: int,
    payload: UserUpdate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> UserResponse:
    return await user_service.update_user(db, user_id, payload)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete a user and everything they wrote",
)
async def delete_user(
    user_id: int,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> Response:
    await user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
