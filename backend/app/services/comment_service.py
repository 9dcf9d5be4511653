"""
Community Board Backend — Comment Service
===========================================

What:  Orchestrates every /comments request.
Who:   Called by the route handlers in app.routes.comments.

Create checks the author first and the board second; the first missing
reference decides which NotFoundError the caller sees. Comments have no
update operation.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.repositories import board_repository, comment_repository, user_repository
from app.schemas.comment import CommentCreate, CommentResponse

logger = logging.getLogger(__name__)


class CommentService:
    """Business logic layer for comment operations."""

    async def list_comments(self, db: AsyncSession) -> List[CommentResponse]:
        try:
            comments = await comment_repository.list_all(db)
            return [CommentResponse.from_entity(comment) for comment in comments]
        except SQLAlchemyError as e:
            logger.error("Database error listing comments: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve comments. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_comment(self, db: AsyncSession, comment_id: int) -> CommentResponse:
        try:
            comment = await comment_repository.get(db, comment_id)
            if comment is None:
                raise NotFoundError(resource="comment", resource_id=comment_id)
            return CommentResponse.from_entity(comment)
        except SQLAlchemyError as e:
            logger.error("Database error fetching comment %s: %s", comment_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the comment. Please try again.",
                context={"comment_id": comment_id},
            )

    async def create_comment(
        self, db: AsyncSession, payload: CommentCreate
    ) -> CommentResponse:
        """
        Persist a new comment under an existing board.

        Raises:
            NotFoundError: userId does not resolve (checked first), or
                           boardId does not resolve (→ 404)
            DatabaseError: the insert failed (→ 500)
        """
        try:
            author = await user_repository.get(db, payload.user_id)
            if author is None:
                raise NotFoundError(resource="user", resource_id=payload.user_id)

            board = await board_repository.get(db, payload.board_id)
            if board is None:
                raise NotFoundError(resource="board", resource_id=payload.board_id)

            comment = await comment_repository.add(db, payload.to_entity(author, board))
            logger.info(
                "Comment created: %s (user=%s, board=%s)", comment.id, author.id, board.id
            )
            return CommentResponse.from_entity(comment)
        except SQLAlchemyError as e:
            logger.error("Database error creating comment: %s", str(e))
            raise DatabaseError(
                message="Could not create the comment. Please try again.",
                context={
                    "user_id": payload.user_id,
                    "board_id": payload.board_id,
                    "error_type": type(e).__name__,
                },
            )

    async def delete_comment(self, db: AsyncSession, comment_id: int) -> None:
        try:
            if not await comment_repository.exists(db, comment_id):
                raise NotFoundError(resource="comment", resource_id=comment_id)
            await comment_repository.delete_by_id(db, comment_id)
            logger.info("Comment deleted: %s", comment_id)
        except SQLAlchemyError as e:
            logger.error("Database error deleting comment %s: %s", comment_id, str(e))
            raise DatabaseError(
                message="Could not delete the comment. Please try again.",
                context={"comment_id": comment_id},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
comment_service = CommentService()
