# Models package init
"""
Importing this package registers every model with Base.metadata so that
string relationship targets ("User", "Board", "Comment") resolve and Alembic
sees all tables.
"""

from app.models.user import User
from app.models.board import Board
from app.models.comment import Comment

__all__ = ["User", "Board", "Comment"]
