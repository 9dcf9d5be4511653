"""
Community Board Backend — User SQLAlchemy Model
=================================================

What:  ORM model representing the `users` table.
Who:   Used by the user repository and by Board/Comment relationships.

Table Design Rationale:
    - 64-bit identity primary key: assigned by the store, never reused
    - email: UNIQUE at the store level only; duplicates surface as IntegrityError
    - created_at: UTC with timezone, set once on creation
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, IdentityType


class User(Base):
    """
    A member of the board.

    Owns zero or more Boards and Comments by reference. Deleting a user
    removes those dependents through the ON DELETE CASCADE foreign keys on
    boards.user_id and comments.user_id; the ORM keeps no collections.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(IdentityType, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name shown next to boards and comments",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Unique contact address",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this user was created (UTC)",
    )

    # AUTOINCREMENT on SQLite so deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    def update(self, name: str, email: str) -> None:
        """Overwrite every mutable field."""
        self.name = name
        self.email = email

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
