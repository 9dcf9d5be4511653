"""
Community Board Backend — Board Service
=========================================

What:  Orchestrates every /boards request.
Who:   Called by the route handlers in app.routes.boards.

Create Flow (POST /boards):
    ┌──────────────┐    ┌──────────────┐    ┌──────────┐    ┌──────────┐
    │ Resolve user │───▶│  Map payload │───▶│  Flush   │───▶│  Shape   │
    │ (404 if not) │    │  to Board    │    │  (store) │    │ response │
    └──────────────┘    └──────────────┘    └──────────┘    └──────────┘

    The user lookup happens before anything is staged, so a failed lookup
    leaves nothing behind to persist.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.models.board import Board
from app.repositories import board_repository, user_repository
from app.schemas.board import BoardCreate, BoardResponse, BoardUpdate

logger = logging.getLogger(__name__)


class BoardService:
    """Business logic layer for board operations."""

    async def _require_board(self, db: AsyncSession, board_id: int) -> Board:
        board = await board_repository.get(db, board_id)
        if board is None:
            raise NotFoundError(resource="board", resource_id=board_id)
        return board

    async def list_boards(self, db: AsyncSession) -> List[BoardResponse]:
        """Every board with its author's id and name projected in."""
        try:
            boards = await board_repository.list_all(db)
            return [BoardResponse.from_entity(board) for board in boards]
        except SQLAlchemyError as e:
            logger.error("Database error listing boards: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve boards. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_board(self, db: AsyncSession, board_id: int) -> BoardResponse:
        try:
            board = await self._require_board(db, board_id)
            return BoardResponse.from_entity(board)
        except SQLAlchemyError as e:
            logger.error("Database error fetching board %s: %s", board_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the board. Please try again.",
                context={"board_id": board_id},
            )

    async def create_board(self, db: AsyncSession, payload: BoardCreate) -> BoardResponse:
        """
        Persist a new board for an existing user.

        Raises:
            NotFoundError: payload.user_id does not resolve (→ 404)
            DatabaseError: the insert failed (→ 500)
        """
        try:
            author = await user_repository.get(db, payload.user_id)
            if author is None:
                raise NotFoundError(resource="user", resource_id=payload.user_id)

            board = await board_repository.add(db, payload.to_entity(author))
            logger.info("Board created: %s (user=%s)", board.id, author.id)
            return BoardResponse.from_entity(board)
        except SQLAlchemyError as e:
            logger.error("Database error creating board: %s", str(e))
            raise DatabaseError(
                message="Could not create the board. Please try again.",
                context={"user_id": payload.user_id, "error_type": type(e).__name__},
            )

    async def update_board(
        self, db: AsyncSession, board_id: int, payload: BoardUpdate
    ) -> BoardResponse:
        """Overwrite title and content. The author reference is left alone."""
        try:
            board = await self._require_board(db, board_id)
            payload.apply_to(board)
            await board_repository.save(db, board)
            logger.info("Board updated: %s", board_id)
            return BoardResponse.from_entity(board)
        except SQLAlchemyError as e:
            logger.error("Database error updating board %s: %s", board_id, str(e))
            raise DatabaseError(
                message="Could not update the board. Please try again.",
                context={"board_id": board_id},
            )

    async def delete_board(self, db: AsyncSession, board_id: int) -> None:
        """Remove a board; its comments are cascaded by the store."""
        try:
            if not await board_repository.exists(db, board_id):
                raise NotFoundError(resource="board", resource_id=board_id)
            await board_repository.delete_by_id(db, board_id)
            logger.info("Board deleted: %s", board_id)
        except SQLAlchemyError as e:
            logger.error("Database error deleting board %s: %s", board_id, str(e))
            raise DatabaseError(
                message="Could not delete the board. Please try again.",
                context={"board_id": board_id},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
board_service = BoardService()
