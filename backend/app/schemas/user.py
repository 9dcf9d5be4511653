"""
Community Board Backend — User Schemas
========================================

What:  API contract for /users and the mapping between it and the User model.
How:   Request models build or overwrite entities (to_entity / apply_to);
       the response model is built from an entity (from_entity).

Email is a plain string. Uniqueness is enforced by the store only.
"""

from datetime import datetime, timezone

from pydantic import Field

from app.models.user import User
from app.schemas.common import CamelModel, UtcDatetime


class UserCreate(CamelModel):
    """Body of POST /users."""
    name: str = Field(min_length=1, max_length=100, description="Display name")
    email: str = Field(min_length=1, max_length=255, description="Unique email address")

    def to_entity(self) -> User:
        return User(
            name=self.name,
            email=self.email,
            created_at=datetime.now(timezone.utc),
        )


class UserUpdate(CamelModel):
    """
    Body of PUT /users/{id}.

    Total replacement: both fields are required and both are written,
    even when unchanged.
    """
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)

    def apply_to(self, user: User) -> User:
        user.update(name=self.name, email=self.email)
        return user


class UserResponse(CamelModel):
    """Returned by every /users endpoint that has a body."""
    id: int = Field(description="Store-assigned identity")
    name: str
    email: str
    created_at: UtcDatetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
