"""
Community Board Backend — Board Schemas
=========================================

What:  API contract for /boards and the mapping between it and the Board model.

Denormalized projection:
    BoardResponse carries the author's id and display name. Both are read
    from the author row at response time, so renaming a user shows up on
    the next read of any of their boards.
"""

from datetime import datetime, timezone

from pydantic import Field

from app.models.board import Board
from app.models.user import User
from app.schemas.common import CamelModel, UtcDatetime


class BoardCreate(CamelModel):
    """Body of POST /boards. userId must name an existing user."""
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, description="Free-text body")
    user_id: int = Field(description="Author; must resolve to an existing user")

    def to_entity(self, author: User) -> Board:
        return Board(
            title=self.title,
            content=self.content,
            user=author,
            created_at=datetime.now(timezone.utc),
        )


class BoardUpdate(CamelModel):
    """
    Body of PUT /boards/{id}.

    Only title and content are replaceable; the author is fixed at creation.
    """
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)

    def apply_to(self, board: Board) -> Board:
        board.update(title=self.title, content=self.content)
        return board


class BoardResponse(CamelModel):
    id: int
    title: str
    content: str
    user_id: int
    user_name: str = Field(description="Author display name (read-time projection)")
    created_at: UtcDatetime

    @classmethod
    def from_entity(cls, board: Board) -> "BoardResponse":
        return cls(
            id=board.id,
            title=board.title,
            content=board.content,
            user_id=board.user.id,
            user_name=board.user.name,
            created_at=board.created_at,
        )
