"""
Generic primary-key CRUD for SQLAlchemy models.

Dependencies: sqlalchemy
System role: Shared persistence helpers for model-specific CRUD classes
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gm_tracker.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Primary-key operations for one model.

    Callers own the session and its transaction; methods only flush.

    Attributes:
        model: Model class operated on
        pk_name: Name of the primary key attribute
    """

    def __init__(self, model: type[ModelT], pk_name: str = "id") -> None:
        self.model = model
        self.pk_name = pk_name

    @property
    def _pk(self):
        return getattr(self.model, self.pk_name)

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert a row and return it refreshed from the database.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            ModelT: The new row
        """
        row = self.model(**values)
        session.add(row)
        await session.flush()
        await session.refresh(row)
        return row

    async def get_by_key(self, session: AsyncSession, key: Any) -> ModelT | None:
        """Return the row with primary key ``key``, or None."""
        result = await session.execute(select(self.model).where(self._pk == key))
        return result.scalar_one_or_none()

    async def get_all(self, session: AsyncSession) -> Sequence[ModelT]:
        result = await session.execute(select(self.model))
        return result.scalars().all()

    async def delete_by_key(self, session: AsyncSession, key: Any) -> bool:
        """
        Delete the row with primary key ``key``.

        Returns:
            bool: False when no row matched
        """
        result = await session.execute(delete(self.model).where(self._pk == key))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, key: Any) -> bool:
        result = await session.execute(select(self._pk).where(self._pk == key))
        return result.scalar_one_or_none() is not None
