"""
Community Board Backend — Board Route Handlers
================================================

What:  GET/POST /boards, GET/PUT/DELETE /boards/{id}.
Who:   Board responses carry userId and userName of the author.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from app.schemas.common import ErrorResponse
from app.services.board_service import board_service

router = APIRouter(prefix="/boards", tags=["Boards"])

NOT_FOUND = {404: {"description": "Board not found", "model": ErrorResponse}}


@router.get("", response_model=List[BoardResponse], summary="List all boards")
async def list_boards(
    response: Response,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[BoardResponse]:
    boards = await board_service.list_boards(db)
    response.headers["X-Total-Count"] = str(len(boards))
    return boards


@router.get(
    "/{board_id}",
    response_model=BoardResponse,
    responses=NOT_FOUND,
    summary="Get a single board by ID",
)
async def get_board(
    board_id: int,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> BoardResponse:
    return await board_service.get_board(db, board_id)


@router.post(
    "",
    response_model=BoardResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Author (userId) not found", "model": ErrorResponse}},
    summary="Create a board for an existing user",
)
async def create_board(
    payload: BoardCreate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> BoardResponse:
    return await board_service.create_board(db, payload)


@router.put(
    "/{board_id}",
    response_model=BoardResponse,
    responses=NOT_FOUND,
    summary="Replace a board's title and content",
)
async def update_board(
    board_id: int,
    payload: BoardUpdate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> BoardResponse:
    return await board_service.update_board(db, board_id, payload)


@router.delete(
    "/{board_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete a board and its comments",
)
async def delete_board(
    board_id: int,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> Response:
    await board_service.delete_board(db, board_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
