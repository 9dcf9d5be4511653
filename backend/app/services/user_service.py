"""
Community Board Backend — User Service
========================================

What:  Orchestrates every /users request: lookup, map, persist, shape.
Who:   Called by the route handlers in app.routes.users.

Error Handling Strategy:
    Missing rows become NotFoundError (→ 404). SQLAlchemy failures, including
    the unique-email violation, are logged and wrapped in DatabaseError
    (→ 500). Email uniqueness is never pre-checked here.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.models.user import User
from app.repositories import user_repository
from app.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Business logic layer for user operations."""

    async def _require_user(self, db: AsyncSession, user_id: int) -> User:
        user = await user_repository.get(db, user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        return user

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        try:
            users = await user_repository.list_all(db)
            return [UserResponse.from_entity(user) for user in users]
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve users. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_user(self, db: AsyncSession, user_id: int) -> UserResponse:
        """
        Retrieve a single user by ID.

        Raises:
            NotFoundError: No user with this ID (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            user = await self._require_user(db, user_id)
            return UserResponse.from_entity(user)
        except SQLAlchemyError as e:
            logger.error("Database error fetching user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the user. Please try again.",
                context={"user_id": user_id},
            )

    async def create_user(self, db: AsyncSession, payload: UserCreate) -> UserResponse:
        """
        Persist a new user.

        A duplicate email fails inside the flush with an IntegrityError and
        is reported as a generic DatabaseError.
        """
        try:
            user = await user_repository.add(db, payload.to_entity())
            logger.info("User created: %s", user.id)
            return UserResponse.from_entity(user)
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", str(e))
            raise DatabaseError(
                message="Could not create the user. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def update_user(
        self, db: AsyncSession, user_id: int, payload: UserUpdate
    ) -> UserResponse:
        """Overwrite name and email of an existing user."""
        try:
            user = await self._require_user(db, user_id)
            payload.apply_to(user)
            await user_repository.save(db, user)
            logger.info("User updated: %s", user_id)
            return UserResponse.from_entity(user)
        except SQLAlchemyError as e:
            logger.error("Database error updating user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not update the user. Please try again.",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

    async def delete_user(self, db: AsyncSession, user_id: int) -> None:
        """
        Remove a user.

        Their boards and comments (and the comments under those boards) are
        removed by the store's cascading foreign keys.
        """
        try:
            if not await user_repository.exists(db, user_id):
                raise NotFoundError(resource="user", resource_id=user_id)
            await user_repository.delete_by_id(db, user_id)
            logger.info("User deleted: %s", user_id)
        except SQLAlchemyError as e:
            logger.error("Database error deleting user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not delete the user. Please try again.",
                context={"user_id": user_id},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
