"""Create users, boards and comments tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the three tables of the community board.
How:   64-bit identity keys; boards.user_id, comments.user_id and
       comments.board_id are NOT NULL foreign keys with ON DELETE CASCADE,
       so deleting a user or board removes its dependents.

Rollback: downgrade() drops all three tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# BIGINT everywhere except SQLite, where only INTEGER PRIMARY KEY aliases rowid
ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Create tables parent-first so foreign keys resolve."""
    op.create_table(
        "users",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column(
            "name",
            sa.String(100),
            nullable=False,
            comment="Display name shown next to boards and comments",
        ),
        sa.Column(
            "email",
            sa.String(255),
            nullable=False,
            comment="Unique contact address",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this user was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "boards",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("user_id", ID_TYPE, nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_boards_user_id", "boards", ["user_id"])

    op.create_table(
        "comments",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("user_id", ID_TYPE, nullable=False),
        sa.Column("board_id", ID_TYPE, nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["board_id"], ["boards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_comments_board_id", "comments", ["board_id"])
    op.create_index("idx_comments_user_id", "comments", ["user_id"])


def downgrade() -> None:
    """Drop child tables first."""
    op.drop_index("idx_comments_user_id", table_name="comments")
    op.drop_index("idx_comments_board_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_boards_user_id", table_name="boards")
    op.drop_table("boards")
    op.drop_table("users")
