"""
Community Board Backend — Generic Repository
==============================================

What:  Persistence and retrieval of one entity type by identity.
Why:   Services ask "does user 3 exist?" or "give me board 7" without
       building SQL themselves, and unit tests can patch a repository
       instead of faking query results.
How:   A small generic class parameterized by the ORM model. Every method
       takes the request's AsyncSession; repositories hold no state.

Repositories never commit. Writes are flushed so the store assigns ids and
enforces constraints inside the request's transaction; the session
dependency decides whether that transaction commits or rolls back.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import MAX_IDENTITY, Base

ModelT = TypeVar("ModelT", bound=Base)


def _issuable(entity_id: int) -> bool:
    # Drivers raise on ints wider than the column; such ids cannot exist
    return 0 < entity_id <= MAX_IDENTITY


class Repository(Generic[ModelT]):
    """CRUD primitives shared by the user, board and comment stores."""

    model: Type[ModelT]

    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def get(self, db: AsyncSession, entity_id: int) -> Optional[ModelT]:
        """Primary key lookup. Returns None when the row does not exist."""
        if not _issuable(entity_id):
            return None
        return await db.get(self.model, entity_id)

    async def list_all(self, db: AsyncSession) -> List[ModelT]:
        """All rows, oldest identity first."""
        result = await db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def exists(self, db: AsyncSession, entity_id: int) -> bool:
        if not _issuable(entity_id):
            return False
        result = await db.execute(
            select(self.model.id).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none() is not None

    async def add(self, db: AsyncSession, entity: ModelT) -> ModelT:
        """Stage a new row and flush so the store assigns its identity."""
        db.add(entity)
        await db.flush()
        return entity

    async def save(self, db: AsyncSession, entity: ModelT) -> ModelT:
        """Flush pending changes on an already-persistent entity."""
        await db.flush()
        return entity

    async def delete_by_id(self, db: AsyncSession, entity_id: int) -> None:
        """
        Remove one row by identity.

        Dependent rows go with it through the ON DELETE CASCADE foreign keys.
        """
        if not _issuable(entity_id):
            return
        await db.execute(delete(self.model).where(self.model.id == entity_id))
        await db.flush()

