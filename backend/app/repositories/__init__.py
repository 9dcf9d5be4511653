# Repositories package init
"""
Community Board Backend — Repository Layer
============================================

What:  One store per entity type, shared as stateless singletons.
Who:   Used by the services in app.services; patched in service unit tests.

Board and comment rows eager-load their author (see the models), so the
generic list_all()/get() already return everything the response mappers read.
"""

from app.models import Board, Comment, User
from app.repositories.base import Repository

user_repository: Repository[User] = Repository(User)
board_repository: Repository[Board] = Repository(Board)
comment_repository: Repository[Comment] = Repository(Comment)

__all__ = [
    "Repository",
    "user_repository",
    "board_repository",
    "comment_repository",
]
