"""
Community Board Backend — User Service Unit Tests
===================================================

What:  Tests for UserService (list, get, create, update, delete).
How:   Uses the mock DB session and a patched user_repository; no real store.

What we test:
    ✅ Unknown ids raise NotFoundError and never reach the write path
    ✅ Update overwrites both fields and keeps the creation time
    ✅ Store failures (including a duplicate email) become DatabaseError
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import IntegrityError, OperationalError

from app.exceptions import DatabaseError, NotFoundError
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.user_service import UserService

CREATED = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def make_user(user_id=1, name="Ann", email="ann@x.com"):
    return User(id=user_id, name=name, email=email, created_at=CREATED)


async def assign_id(db, entity):
    entity.id = 7
    return entity


class TestUserServiceRead:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_get_user_found(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.get = AsyncMock(return_value=make_user())

            result = await self.service.get_user(mock_db_session, 1)

            assert result.id == 1
            assert result.name == "Ann"
            assert result.created_at == CREATED
            repo.get.assert_awaited_once_with(mock_db_session, 1)

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.get = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError) as exc_info:
                await self.service.get_user(mock_db_session, 42)

            assert exc_info.value.resource == "user"
            assert exc_info.value.resource_id == 42

    @pytest.mark.asyncio
    async def test_list_users_keeps_store_order(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.list_all = AsyncMock(
                return_value=[make_user(1, "Ann", "a@x.com"), make_user(2, "Bo", "b@x.com")]
            )

            result = await self.service.list_users(mock_db_session)

            assert [u.id for u in result] == [1, 2]

    @pytest.mark.asyncio
    async def test_list_users_store_failure(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.list_all = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception()))

            with pytest.raises(DatabaseError):
                await self.service.list_users(mock_db_session)


class TestUserServiceWrite:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_create_user(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.add = AsyncMock(side_effect=assign_id)

            result = await self.service.create_user(
                mock_db_session, UserCreate(name="Ann", email="ann@x.com")
            )

            assert result.id == 7
            assert result.email == "ann@x.com"
            assert result.created_at.tzinfo is not None
            repo.add.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email_is_database_error(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.add = AsyncMock(
                side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
            )

            with pytest.raises(DatabaseError) as exc_info:
                await self.service.create_user(
                    mock_db_session, UserCreate(name="Ann", email="ann@x.com")
                )

            assert exc_info.value.context["error_type"] == "IntegrityError"

    @pytest.mark.asyncio
    async def test_update_user_overwrites_fields(self, mock_db_session):
        user = make_user()
        with patch("app.services.user_service.user_repository") as repo:
            repo.get = AsyncMock(return_value=user)
            repo.save = AsyncMock()

            result = await self.service.update_user(
                mock_db_session, 1, UserUpdate(name="Annie", email="annie@x.com")
            )

            assert (result.name, result.email) == ("Annie", "annie@x.com")
            assert result.created_at == CREATED
            repo.save.assert_awaited_once_with(mock_db_session, user)

    @pytest.mark.asyncio
    async def test_update_unknown_user_does_not_save(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.get = AsyncMock(return_value=None)
            repo.save = AsyncMock()

            with pytest.raises(NotFoundError):
                await self.service.update_user(
                    mock_db_session, 9, UserUpdate(name="X", email="x@x.com")
                )

            repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_user(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.exists = AsyncMock(return_value=True)
            repo.delete_by_id = AsyncMock()

            await self.service.delete_user(mock_db_session, 1)

            repo.delete_by_id.assert_awaited_once_with(mock_db_session, 1)

    @pytest.mark.asyncio
    async def test_delete_unknown_user(self, mock_db_session):
        with patch("app.services.user_service.user_repository") as repo:
            repo.exists = AsyncMock(return_value=False)
            repo.delete_by_id = AsyncMock()

            with pytest.raises(NotFoundError):
                await self.service.delete_user(mock_db_session, 1)

            repo.delete_by_id.assert_not_awaited()
