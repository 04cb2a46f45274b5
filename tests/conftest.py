"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory local store, fake hosted backend over httpx.MockTransport,
remote store wired to the fake, sample entities
Dependencies: pytest, httpx, sqlalchemy
System role: Test infrastructure and fixture management
"""

import json
import uuid
from typing import Any

import httpx
import pytest

from gm_tracker.boundary.db.connection import get_async_engine, get_async_session_factory
from gm_tracker.boundary.remote.rest_client import RemoteBackendClient
from gm_tracker.boundary.store.local_store import LocalStore
from gm_tracker.boundary.store.remote_store import RemoteStore
from gm_tracker.configs.local_store import LocalStoreSettings
from gm_tracker.models import Customer, Employee, EmployeeRole, Project, ProjectStatus, TeamMember


class FakeRemoteBackend:
    """In-memory stand-in for the hosted table and auth API."""

    VALID_PASSWORD = "secret"

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []
        self.failing_tables: set[str] = set()
        self.tokens: dict[str, str] = {}
        self.registered: set[str] = set()

    def rows(self, table: str) -> list[dict[str, Any]]:
        return self.tables.setdefault(table, [])

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith("/auth/v1/"):
            return self._auth(request, path[len("/auth/v1/"):])

        table = path[len("/rest/v1/"):]
        if table in self.failing_tables:
            return httpx.Response(500, json={"message": f"{table} unavailable"})
        rows = self.rows(table)

        if request.method == "GET":
            result = list(rows)
            order = request.url.params.get("order")
            if order:
                column, direction = order.rsplit(".", 1)
                result.sort(key=lambda r: str(r.get(column) or ""), reverse=direction == "desc")
            return httpx.Response(200, json=result)

        if request.method == "POST":
            row = json.loads(request.content)
            if "return=minimal" in request.headers.get("Prefer", ""):
                rows.append(row)
                return httpx.Response(201)
            row.setdefault("id", str(uuid.uuid4()))
            for index, existing in enumerate(rows):
                if existing["id"] == row["id"]:
                    rows[index] = {**existing, **row}
                    return httpx.Response(201, json=[rows[index]])
            rows.append(row)
            return httpx.Response(201, json=[row])

        if request.method == "DELETE":
            column, condition = next(iter(request.url.params.items()))
            value = condition[len("eq."):]
            self.tables[table] = [r for r in rows if str(r.get(column)) != value]
            return httpx.Response(204)

        return httpx.Response(405)

    def _auth(self, request: httpx.Request, endpoint: str) -> httpx.Response:
        if endpoint == "token":
            body = json.loads(request.content)
            if body["password"] != self.VALID_PASSWORD:
                return httpx.Response(
                    400,
                    json={"error": "invalid_grant", "error_description": "Invalid login credentials"},
                )
            token = f"token-{uuid.uuid4().hex}"
            self.tokens[token] = body["email"]
            return httpx.Response(
                200,
                json={
                    "access_token": token,
                    "refresh_token": "refresh-token",
                    "expires_in": 3600,
                    "user": {"id": "user-1", "email": body["email"]},
                },
            )

        if endpoint == "signup":
            body = json.loads(request.content)
            if body["email"] in self.registered:
                return httpx.Response(422, json={"msg": "User already registered"})
            self.registered.add(body["email"])
            return httpx.Response(200, json={"id": "user-2", "email": body["email"]})

        token = request.headers.get("Authorization", "")[len("Bearer "):]
        if endpoint == "user":
            if token not in self.tokens:
                return httpx.Response(401, json={"msg": "invalid JWT"})
            return httpx.Response(200, json={"id": "user-1", "email": self.tokens[token]})
        if endpoint == "logout":
            self.tokens.pop(token, None)
            return httpx.Response(204)

        return httpx.Response(404)


@pytest.fixture
def local_settings() -> LocalStoreSettings:
    """Settings for an in-memory fallback database."""
    return LocalStoreSettings(database_url="sqlite+aiosqlite:///:memory:", key_prefix="test")


@pytest.fixture
async def local_store(local_settings: LocalStoreSettings):
    """
    Create a LocalStore over in-memory SQLite.

    Yields:
        LocalStore: Initialized store, disposed after the test
    """
    engine = get_async_engine(local_settings.database_url)
    store = LocalStore(
        session_factory=get_async_session_factory(engine),
        settings=local_settings,
        engine=engine,
    )
    await store.initialize()
    yield store
    await store.aclose()


@pytest.fixture
def fake_backend() -> FakeRemoteBackend:
    """Fresh in-memory hosted backend."""
    return FakeRemoteBackend()


@pytest.fixture
async def remote_client(fake_backend: FakeRemoteBackend):
    """RemoteBackendClient routed to the fake backend."""
    client = RemoteBackendClient(
        "https://example.supabase.co/",
        "anon-key",
        transport=httpx.MockTransport(fake_backend.handle),
    )
    yield client
    await client.aclose()


@pytest.fixture
def remote_store(remote_client: RemoteBackendClient) -> RemoteStore:
    """RemoteStore wired to the fake backend."""
    return RemoteStore(remote_client)


@pytest.fixture
def sample_customer() -> Customer:
    return Customer(id="c1", name="Acme Corp", address="123 Tech Blvd", contact_person="John Doe")


@pytest.fixture
def sample_employee() -> Employee:
    return Employee(id="e2", name="Bob Sales", role=EmployeeRole.SALES)


@pytest.fixture
def sample_project() -> Project:
    return Project(
        id="p1",
        name="ERP Migration 2024",
        customer_id="c1",
        customer_name="Acme Corp",
        start_date="2024-01-15",
        status=ProjectStatus.ON_PROGRESS,
        value=150000000,
        team=[TeamMember(role=EmployeeRole.PM, name="Alice PM", employee_id="e1")],
    )
