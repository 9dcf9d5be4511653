"""
Community Board Backend — Board SQLAlchemy Model
==================================================

What:  ORM model representing the `boards` table.

Query Patterns:
    - List boards: SELECT boards JOIN users ORDER BY boards.id
      → the author is eager-loaded (lazy="joined") because async sessions
        cannot lazy-load on attribute access, and every board response
        carries the author's display name
    - Get single board: primary key lookup, same join
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, IdentityType

if TYPE_CHECKING:
    from app.models.user import User


class Board(Base):
    """
    A post on the board, written by exactly one user.

    Deleting a board removes its comments through comments.board_id's
    ON DELETE CASCADE.
    """

    __tablename__ = "boards"

    id: Mapped[int] = mapped_column(IdentityType, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(200), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Immutable after creation: update() never touches it
    user_id: Mapped[int] = mapped_column(
        IdentityType,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    user: Mapped["User"] = relationship(lazy="joined")

    __table_args__ = (
        Index("idx_boards_user_id", "user_id"),
        {"sqlite_autoincrement": True},
    )

    def update(self, title: str, content: str) -> None:
        """Overwrite title and content; the author stays as it is."""
        self.title = title
        self.content = content

    def __repr__(self) -> str:
        return f"<Board(id={self.id}, user_id={self.user_id}, title='{self.title}')>"
