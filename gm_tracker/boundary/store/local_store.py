"""
Local fallback data store.

Data gateway over a key-to-JSON-blob table: one blob per collection and
one for the session. Every read deserializes a whole collection and every
write reserializes it. Saves match on exact id equality (replace on hit,
append on miss) and never generate ids; callers supply locally-unique ids.
No audit trail is written in this mode.

Dependencies: sqlalchemy, gm_tracker.boundary.db
System role: Fallback storage gateway implementation
"""

import logging
from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from gm_tracker.boundary.db.connection import create_all_tables
from gm_tracker.boundary.db.CRUD.local_blob_crud import local_blob_crud
from gm_tracker.boundary.store.base import DataStore, utc_now_iso
from gm_tracker.configs.local_store import LocalStoreSettings
from gm_tracker.core.exceptions import InvalidCredentialsError, UnsupportedOperationError
from gm_tracker.models.auth import AuthSession, SessionUser
from gm_tracker.models.common import StoreResult, TrackedEntity
from gm_tracker.models.customer import Customer
from gm_tracker.models.employee import Employee
from gm_tracker.models.project import Project

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=TrackedEntity)

FALLBACK_EMAIL = "admin@company.com"
FALLBACK_PASSWORD = "admin"
INVALID_CREDENTIALS_MESSAGE = f"Invalid credentials (Mock: {FALLBACK_EMAIL} / {FALLBACK_PASSWORD})"


class LocalStore(DataStore):
    """Storage gateway backed by the local SQLite key-value table."""

    backend_name = "local"

    def __init__(
        self,
        session_factory: async_sessionmaker,
        settings: LocalStoreSettings,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize local store.

        Args:
            session_factory: Async session factory bound to the fallback database
            settings: Storage key configuration
            engine: Engine to create tables on and dispose at shutdown
        """
        self._session_factory = session_factory
        self._engine = engine
        self.settings = settings

    async def initialize(self) -> None:
        if self._engine is not None:
            await create_all_tables(self._engine)

    async def aclose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()

    # Blob access

    async def has_key(self, key: str) -> bool:
        """True when a blob is stored under ``key``."""
        async with self._session_factory() as db:
            return await local_blob_crud.exists(db, key)

    async def read_collection(self, key: str, model: type[EntityT]) -> list[EntityT]:
        """Deserialize a whole collection, in stored order."""
        async with self._session_factory() as db:
            data = await local_blob_crud.read_json(db, key)
        return [model.model_validate(item) for item in data or []]

    async def write_collection(self, key: str, items: list[BaseModel]) -> None:
        """Reserialize a whole collection."""
        async with self._session_factory() as db:
            await local_blob_crud.write_json(
                db,
                key,
                [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items],
            )
            await db.commit()

    async def _upsert(self, key: str, entity: EntityT) -> EntityT:
        items = await self.read_collection(key, type(entity))
        for index, existing in enumerate(items):
            if existing.id == entity.id:
                items[index] = entity
                break
        else:
            items.append(entity)
        await self.write_collection(key, items)
        return entity

    async def _remove(self, key: str, model: type[EntityT], entity_id: str) -> None:
        items = await self.read_collection(key, model)
        remaining = [item for item in items if item.id != entity_id]
        if len(remaining) != len(items):
            await self.write_collection(key, remaining)

    # Projects

    async def fetch_projects(self) -> StoreResult[list[Project]]:
        key = self.settings.projects_key
        return await self._guarded("fetch", key, self.read_collection(key, Project), default=[])

    async def save_project(self, project: Project) -> StoreResult[Project]:
        key = self.settings.projects_key
        stamped = project.model_copy(update={"updated_at": utc_now_iso()})
        return await self._guarded("save", key, self._upsert(key, stamped))

    async def delete_project(self, project_id: str) -> StoreResult[None]:
        key = self.settings.projects_key
        return await self._guarded("delete", key, self._remove(key, Project, project_id))

    # Customers

    async def fetch_customers(self) -> StoreResult[list[Customer]]:
        key = self.settings.customers_key
        return await self._guarded("fetch", key, self.read_collection(key, Customer), default=[])

    async def save_customer(self, customer: Customer) -> StoreResult[Customer]:
        key = self.settings.customers_key
        return await self._guarded("save", key, self._upsert(key, customer))

    async def delete_customer(self, customer_id: str) -> StoreResult[None]:
        key = self.settings.customers_key
        return await self._guarded("delete", key, self._remove(key, Customer, customer_id))

    # Employees

    async def fetch_employees(self) -> StoreResult[list[Employee]]:
        key = self.settings.employees_key
        return await self._guarded("fetch", key, self.read_collection(key, Employee), default=[])

    async def save_employee(self, employee: Employee) -> StoreResult[Employee]:
        key = self.settings.employees_key
        return await self._guarded("save", key, self._upsert(key, employee))

    async def delete_employee(self, employee_id: str) -> StoreResult[None]:
        key = self.settings.employees_key
        return await self._guarded("delete", key, self._remove(key, Employee, employee_id))

    # Authentication

    async def sign_in(self, email: str, password: str) -> AuthSession:
        if email != FALLBACK_EMAIL or password != FALLBACK_PASSWORD:
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        session = AuthSession(
            user=SessionUser(email=email, id="mock-id"),
            access_token="mock-token",
        )
        async with self._session_factory() as db:
            await local_blob_crud.write_json(
                db, self.settings.session_key, session.model_dump(mode="json", exclude_none=True)
            )
            await db.commit()
        return session

    async def sign_up(self, email: str, password: str) -> None:
        raise UnsupportedOperationError("sign_up", self.backend_name)

    async def sign_out(self) -> None:
        async with self._session_factory() as db:
            await local_blob_crud.delete_by_key(db, self.settings.session_key)
            await db.commit()

    async def get_session(self) -> AuthSession | None:
        async with self._session_factory() as db:
            data = await local_blob_crud.read_json(db, self.settings.session_key)
        if not data:
            return None
        return AuthSession.model_validate(data)
