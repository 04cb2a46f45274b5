"""
Data gateway contract.

One CRUD surface per entity kind plus the authentication gate,
implemented by RemoteStore and LocalStore. The implementation is chosen
once at composition time and injected; nothing branches on a global
backend flag.

Data operations never raise: backend failures are logged and returned
as a failed StoreResult carrying a safe default. Authentication
operations raise so the caller can show the error.

Dependencies: sqlalchemy, gm_tracker.models, gm_tracker.core.exceptions
System role: Storage gateway interface
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from datetime import datetime, timezone
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError

from gm_tracker.core.exceptions import TrackerException
from gm_tracker.models.auth import AuthSession
from gm_tracker.models.common import StoreResult
from gm_tracker.models.customer import Customer
from gm_tracker.models.employee import Employee
from gm_tracker.models.project import Project
from gm_tracker.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


def utc_now_iso() -> str:
    """Return current UTC time as an ISO 8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DataStore(ABC):
    """Storage gateway: uniform CRUD and auth over one backend."""

    backend_name: str = ""

    async def initialize(self) -> None:
        """Prepare the backend for use. Called once by the composition root."""
        return None

    async def aclose(self) -> None:
        """Release backend resources."""
        return None

    async def _guarded(
        self,
        operation: str,
        table: str,
        call: Awaitable[T],
        default: T | None = None,
    ) -> StoreResult[T]:
        """
        Await a backend call and convert failures into a failed result.

        Args:
            operation: Operation name for diagnostics
            table: Table or collection name for diagnostics
            call: Backend coroutine
            default: Value returned alongside a failure

        Returns:
            StoreResult: Success with the call's value, or failure with ``default``
        """
        try:
            value = await call
        except (TrackerException, SQLAlchemyError, ValueError) as e:
            log_exception_with_context(
                logger,
                f"Error during {operation} on {table}",
                e,
                backend=self.backend_name,
                operation=operation,
                table=table,
            )
            return StoreResult.failure(str(e), default)
        return StoreResult.success(value)

    # Projects

    @abstractmethod
    async def fetch_projects(self) -> StoreResult[list[Project]]:
        """Read all projects. Failure yields an empty list."""

    @abstractmethod
    async def save_project(self, project: Project) -> StoreResult[Project]:
        """Upsert a project, stamping updated_at with the current time."""

    @abstractmethod
    async def delete_project(self, project_id: str) -> StoreResult[None]:
        """Delete a project by id. Deleting an absent id is a no-op."""

    # Customers

    @abstractmethod
    async def fetch_customers(self) -> StoreResult[list[Customer]]:
        """Read all customers. Failure yields an empty list."""

    @abstractmethod
    async def save_customer(self, customer: Customer) -> StoreResult[Customer]:
        """Upsert a customer."""

    @abstractmethod
    async def delete_customer(self, customer_id: str) -> StoreResult[None]:
        """Delete a customer by id. Projects referencing it are left untouched."""

    # Employees

    @abstractmethod
    async def fetch_employees(self) -> StoreResult[list[Employee]]:
        """Read all employees. Failure yields an empty list."""

    @abstractmethod
    async def save_employee(self, employee: Employee) -> StoreResult[Employee]:
        """Upsert an employee."""

    @abstractmethod
    async def delete_employee(self, employee_id: str) -> StoreResult[None]:
        """Delete an employee by id. Project team snapshots are left untouched."""

    # Authentication

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Establish a session.

        Raises:
            InvalidCredentialsError: If the credentials are rejected
        """

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> None:
        """
        Register a user.

        Raises:
            UnsupportedOperationError: If the backend has no sign-up
        """

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session."""

    @abstractmethod
    async def get_session(self) -> AuthSession | None:
        """Return the current session, None when signed out."""
