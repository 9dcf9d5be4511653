"""
Community Board Backend — Comment Service Unit Tests
======================================================

What:  Tests for CommentService with patched repositories.

What we test:
    ✅ The author is resolved before the board
    ✅ A missing reference stops the create before anything is staged
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

from app.exceptions import NotFoundError
from app.models.board import Board
from app.models.comment import Comment
from app.models.user import User
from app.schemas.comment import CommentCreate
from app.services.comment_service import CommentService

CREATED = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def make_author(user_id=3, name="Ann"):
    return User(id=user_id, name=name, email="ann@x.com", created_at=CREATED)


def make_board(board_id=4):
    return Board(id=board_id, title="T", content="C", user_id=3, created_at=CREATED)


async def assign_id(db, entity):
    entity.id = 21
    return entity


class TestCommentServiceCreate:

    def setup_method(self):
        self.service = CommentService()

    @pytest.mark.asyncio
    async def test_create_comment(self, mock_db_session):
        with patch("app.services.comment_service.user_repository") as users, \
             patch("app.services.comment_service.board_repository") as boards, \
             patch("app.services.comment_service.comment_repository") as comments:
            users.get = AsyncMock(return_value=make_author(3, "Ann"))
            boards.get = AsyncMock(return_value=make_board(4))
            comments.add = AsyncMock(side_effect=assign_id)

            result = await self.service.create_comment(
                mock_db_session, CommentCreate(content="C", user_id=3, board_id=4)
            )

            assert result.id == 21
            assert (result.user_id, result.user_name, result.board_id) == (3, "Ann", 4)

    @pytest.mark.asyncio
    async def test_unknown_user_checked_before_board(self, mock_db_session):
        with patch("app.services.comment_service.user_repository") as users, \
             patch("app.services.comment_service.board_repository") as boards, \
             patch("app.services.comment_service.comment_repository") as comments:
            users.get = AsyncMock(return_value=None)
            boards.get = AsyncMock(return_value=None)
            comments.add = AsyncMock()

            with pytest.raises(NotFoundError) as exc_info:
                await self.service.create_comment(
                    mock_db_session, CommentCreate(content="C", user_id=1, board_id=1)
                )

            assert exc_info.value.resource == "user"
            boards.get.assert_not_awaited()
            comments.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_board(self, mock_db_session):
        with patch("app.services.comment_service.user_repository") as users, \
             patch("app.services.comment_service.board_repository") as boards, \
             patch("app.services.comment_service.comment_repository") as comments:
            users.get = AsyncMock(return_value=make_author())
            boards.get = AsyncMock(return_value=None)
            comments.add = AsyncMock()

            with pytest.raises(NotFoundError) as exc_info:
                await self.service.create_comment(
                    mock_db_session, CommentCreate(content="C", user_id=3, board_id=99999)
                )

            assert exc_info.value.resource == "board"
            assert exc_info.value.resource_id == 99999
            comments.add.assert_not_awaited()


class TestCommentServiceRead:

    def setup_method(self):
        self.service = CommentService()

    @pytest.mark.asyncio
    async def test_get_comment(self, mock_db_session):
        comment = Comment(
            id=2, content="hi", user=make_author(3, "Ann"), user_id=3, board_id=4,
            created_at=CREATED,
        )
        with patch("app.services.comment_service.comment_repository") as comments:
            comments.get = AsyncMock(return_value=comment)

            result = await self.service.get_comment(mock_db_session, 2)

            assert result.user_name == "Ann"
            assert result.board_id == 4

    @pytest.mark.asyncio
    async def test_delete_unknown_comment(self, mock_db_session):
        with patch("app.services.comment_service.comment_repository") as comments:
            comments.exists = AsyncMock(return_value=False)
            comments.delete_by_id = AsyncMock()

            with pytest.raises(NotFoundError):
                await self.service.delete_comment(mock_db_session, 2)

            comments.delete_by_id.assert_not_awaited()
