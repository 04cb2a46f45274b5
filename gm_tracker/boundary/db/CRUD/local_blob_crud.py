"""
Local blob CRUD operations.

Read, replace and remove whole JSON documents by storage key.

Dependencies: sqlalchemy, gm_tracker.boundary.db.models
System role: Key-value persistence for the local fallback store
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from gm_tracker.boundary.db.CRUD.base_crud import BaseCRUD
from gm_tracker.boundary.db.models.local_blob_model import LocalBlobModel


class LocalBlobCRUD(BaseCRUD[LocalBlobModel]):
    """
    CRUD operations for LocalBlobModel.

    Extends BaseCRUD with whole-document reads and writes by key.
    """

    def __init__(self) -> None:
        """Initialize LocalBlobCRUD with LocalBlobModel."""
        super().__init__(LocalBlobModel, pk_name="key")

    async def read_json(self, session: AsyncSession, key: str) -> Any | None:
        """
        Read and decode the blob stored under a key.

        Args:
            session: Async database session
            key: Storage key

        Returns:
            Decoded JSON value, None if the key is absent

        Raises:
            ValueError: If the stored blob is not valid JSON
        """
        row = await self.get_by_key(session, key)
        if row is None:
            return None
        return row.value

    async def write_json(self, session: AsyncSession, key: str, value: Any) -> None:
        """
        Store a value, replacing any existing blob.

        Args:
            session: Async database session
            key: Storage key
            value: JSON-serializable value
        """
        row = await self.get_by_key(session, key)
        if row is None:
            await self.create(session, key=key, value=value)
            return
        row.value = value
        await session.flush()


local_blob_crud = LocalBlobCRUD()
