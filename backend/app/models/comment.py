"""
Community Board Backend — Comment SQLAlchemy Model
====================================================

What:  ORM model representing the `comments` table.
Why:   Comments hang off a board and are written by a user; both references
       are required and never change after creation.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, IdentityType

if TYPE_CHECKING:
    from app.models.user import User


class Comment(Base):
    """A reply under a board. There is no update path for comments."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(IdentityType, primary_key=True, autoincrement=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    user_id: Mapped[int] = mapped_column(
        IdentityType,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    board_id: Mapped[int] = mapped_column(
        IdentityType,
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Author name is projected into every response, so load it with the row.
    # The board is only ever exposed by id.
    user: Mapped["User"] = relationship(lazy="joined")

    __table_args__ = (
        Index("idx_comments_board_id", "board_id"),
        Index("idx_comments_user_id", "user_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Comment(id={self.id}, user_id={self.user_id}, "
            f"board_id={self.board_id})>"
        )
