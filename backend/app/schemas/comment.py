"""
Community Board Backend — Comment Schemas
===========================================

What:  API contract for /comments. There is no update body: comments are
       immutable once written.
"""

from datetime import datetime, timezone

from pydantic import Field

from app.models.board import Board
from app.models.comment import Comment
from app.models.user import User
from app.schemas.common import CamelModel, UtcDatetime


class CommentCreate(CamelModel):
    """Body of POST /comments. Both references must resolve."""
    content: str = Field(min_length=1)
    user_id: int
    board_id: int

    def to_entity(self, author: User, board: Board) -> Comment:
        return Comment(
            content=self.content,
            user=author,
            board_id=board.id,
            created_at=datetime.now(timezone.utc),
        )


class CommentResponse(CamelModel):
    id: int
    content: str
    user_id: int
    user_name: str = Field(description="Author display name (read-time projection)")
    board_id: int
    created_at: UtcDatetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            user_id=comment.user.id,
            user_name=comment.user.name,
            board_id=comment.board_id,
            created_at=comment.created_at,
        )
