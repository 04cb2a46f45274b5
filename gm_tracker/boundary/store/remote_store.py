"""
Remote data store.

Data gateway over the hosted relational store. Rows are translated by
the field mapper; ids are issued by the backend for any entity whose
identity is not yet persisted. Project mutations, customer saves and
sign-in/out are recorded by the activity logger.

Dependencies: gm_tracker.boundary.remote, gm_tracker.core.field_mapper
System role: Production storage gateway implementation
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from gm_tracker.boundary.remote.rest_client import RemoteBackendClient
from gm_tracker.boundary.store.activity_logger import ActivityAction, ActivityLogger
from gm_tracker.boundary.store.base import DataStore, utc_now_iso
from gm_tracker.core import field_mapper
from gm_tracker.core.exceptions import (
    AuthenticationError,
    InvalidCredentialsError,
    RemoteBackendError,
)
from gm_tracker.models.auth import AuthSession, SessionUser
from gm_tracker.models.common import StoreResult, TrackedEntity
from gm_tracker.models.customer import Customer
from gm_tracker.models.employee import Employee
from gm_tracker.models.project import Project

logger = logging.getLogger(__name__)

PROJECTS_TABLE = "projects"
CUSTOMERS_TABLE = "customers"
EMPLOYEES_TABLE = "team_members"

EntityT = TypeVar("EntityT", bound=TrackedEntity)

# Status codes the auth API uses for rejected credentials
_CREDENTIAL_REJECTIONS = {400, 401, 403, 422}


def _upsert_payload(entity: TrackedEntity, row: dict[str, Any]) -> dict[str, Any]:
    """Drop the id unless it was issued by the backend, so a new one is generated."""
    if not entity.is_persisted:
        row.pop("id", None)
    return row


class RemoteStore(DataStore):
    """
    Storage gateway backed by the hosted REST backend.

    The signed-in session lives on this instance for the process lifetime.
    """

    backend_name = "remote"

    def __init__(
        self,
        client: RemoteBackendClient,
        activity_logger: ActivityLogger | None = None,
    ) -> None:
        """
        Initialize remote store.

        Args:
            client: REST client for the hosted backend
            activity_logger: Audit trail recorder (defaults to one on ``client``)
        """
        self.client = client
        self.activity = activity_logger or ActivityLogger(client)
        self._session: AuthSession | None = None

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _select(
        self,
        table: str,
        order: str,
        ascending: bool,
        from_storage: Callable[[dict[str, Any]], EntityT],
    ) -> list[EntityT]:
        rows = await self.client.select(table, order=order, ascending=ascending)
        records = [row for row in rows if isinstance(row, dict)]
        if len(records) != len(rows):
            logger.warning(
                "Skipped malformed rows",
                extra={"table": table, "skipped": len(rows) - len(records)},
            )
        return [from_storage(record) for record in records]

    async def _upsert(
        self,
        table: str,
        entity: EntityT,
        to_storage: Callable[[EntityT], dict[str, Any]],
        from_storage: Callable[[dict[str, Any]], EntityT],
    ) -> EntityT:
        payload = _upsert_payload(entity, to_storage(entity))
        rows = await self.client.upsert(table, payload)
        if rows:
            return from_storage(rows[0])
        return entity

    # Projects

    async def fetch_projects(self) -> StoreResult[list[Project]]:
        return await self._guarded(
            "fetch",
            PROJECTS_TABLE,
            self._select(PROJECTS_TABLE, "updated_at", False, field_mapper.project_from_storage),
            default=[],
        )

    async def save_project(self, project: Project) -> StoreResult[Project]:
        async def _save() -> Project:
            stamped = project.model_copy(update={"updated_at": utc_now_iso()})
            saved = await self._upsert(
                PROJECTS_TABLE,
                stamped,
                field_mapper.project_to_storage,
                field_mapper.project_from_storage,
            )
            action = (
                ActivityAction.UPDATE_PROJECT if stamped.is_persisted else ActivityAction.CREATE_PROJECT
            )
            await self.activity.log(action, f"Project: {project.name}")
            return saved

        return await self._guarded("save", PROJECTS_TABLE, _save())

    async def delete_project(self, project_id: str) -> StoreResult[None]:
        async def _delete() -> None:
            await self.client.delete_eq(PROJECTS_TABLE, "id", project_id)
            await self.activity.log(ActivityAction.DELETE_PROJECT, f"Project ID: {project_id}")

        return await self._guarded("delete", PROJECTS_TABLE, _delete())

    # Customers

    async def fetch_customers(self) -> StoreResult[list[Customer]]:
        return await self._guarded(
            "fetch",
            CUSTOMERS_TABLE,
            self._select(CUSTOMERS_TABLE, "name", True, field_mapper.customer_from_storage),
            default=[],
        )

    async def save_customer(self, customer: Customer) -> StoreResult[Customer]:
        async def _save() -> Customer:
            saved = await self._upsert(
                CUSTOMERS_TABLE,
                customer,
                field_mapper.customer_to_storage,
                field_mapper.customer_from_storage,
            )
            await self.activity.log(ActivityAction.UPDATE_CUSTOMER, f"Customer: {customer.name}")
            return saved

        return await self._guarded("save", CUSTOMERS_TABLE, _save())

    async def delete_customer(self, customer_id: str) -> StoreResult[None]:
        return await self._guarded(
            "delete",
            CUSTOMERS_TABLE,
            self.client.delete_eq(CUSTOMERS_TABLE, "id", customer_id),
        )

    # Employees

    async def fetch_employees(self) -> StoreResult[list[Employee]]:
        return await self._guarded(
            "fetch",
            EMPLOYEES_TABLE,
            self._select(EMPLOYEES_TABLE, "name", True, field_mapper.employee_from_storage),
            default=[],
        )

    async def save_employee(self, employee: Employee) -> StoreResult[Employee]:
        return await self._guarded(
            "save",
            EMPLOYEES_TABLE,
            self._upsert(
                EMPLOYEES_TABLE,
                employee,
                field_mapper.employee_to_storage,
                field_mapper.employee_from_storage,
            ),
        )

    async def delete_employee(self, employee_id: str) -> StoreResult[None]:
        return await self._guarded(
            "delete",
            EMPLOYEES_TABLE,
            self.client.delete_eq(EMPLOYEES_TABLE, "id", employee_id),
        )

    # Authentication

    async def sign_in(self, email: str, password: str) -> AuthSession:
        try:
            payload = await self.client.sign_in_with_password(email, password)
        except RemoteBackendError as e:
            if e.status_code in _CREDENTIAL_REJECTIONS:
                raise InvalidCredentialsError(e.message, details={"status_code": e.status_code}) from e
            raise

        access_token = payload.get("access_token")
        if not access_token:
            raise AuthenticationError("Sign-in response did not include an access token")

        user = payload.get("user") or {}
        session = AuthSession(
            user=SessionUser(id=user.get("id"), email=user.get("email", email)),
            access_token=access_token,
            refresh_token=payload.get("refresh_token"),
            expires_in=payload.get("expires_in"),
        )
        self.client.set_access_token(access_token)
        self._session = session
        logger.info("User signed in", extra={"backend": self.backend_name})

        await self.activity.log(ActivityAction.LOGIN, "User signed in successfully")
        return session

    async def sign_up(self, email: str, password: str) -> None:
        try:
            await self.client.sign_up(email, password)
        except RemoteBackendError as e:
            if e.status_code in _CREDENTIAL_REJECTIONS:
                raise AuthenticationError(e.message, details={"status_code": e.status_code}) from e
            raise
        logger.info("User signed up", extra={"backend": self.backend_name})

    async def sign_out(self) -> None:
        await self.activity.log(ActivityAction.LOGOUT, "User signed out")
        try:
            await self.client.sign_out()
        finally:
            self.client.set_access_token(None)
            self._session = None
        logger.info("User signed out", extra={"backend": self.backend_name})

    async def get_session(self) -> AuthSession | None:
        return self._session
