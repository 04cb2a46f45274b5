"""
Integration tests for LocalStore against in-memory SQLite.

Covers upsert-by-exact-id, idempotent deletes, no-cascade deletes,
timestamping, failure conversion and the fixed-credential sign-in.
"""

from datetime import datetime
from unittest.mock import patch

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from gm_tracker.boundary.store.local_store import (
    FALLBACK_EMAIL,
    FALLBACK_PASSWORD,
    INVALID_CREDENTIALS_MESSAGE,
    LocalStore,
)
from gm_tracker.core.exceptions import InvalidCredentialsError, UnsupportedOperationError
from gm_tracker.models import Customer, Employee, Project


def _parse(timestamp: str) -> datetime:
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


class TestProjectCollection:
    """Test suite for project save/fetch/delete."""

    @pytest.mark.asyncio
    async def test_empty_store_fetches_empty_list(self, local_store: LocalStore) -> None:
        result = await local_store.fetch_projects()

        assert result.ok is True
        assert result.value == []

    @pytest.mark.asyncio
    async def test_save_with_fresh_id_appends(self, local_store: LocalStore, sample_project: Project) -> None:
        await local_store.save_project(sample_project)
        await local_store.save_project(sample_project.model_copy(update={"id": "p2", "name": "Second"}))

        projects = (await local_store.fetch_projects()).value
        assert [p.id for p in projects] == ["p1", "p2"]

    @pytest.mark.asyncio
    async def test_save_with_same_id_replaces_in_place(
        self, local_store: LocalStore, sample_project: Project
    ) -> None:
        await local_store.save_project(sample_project)
        await local_store.save_project(sample_project.model_copy(update={"id": "p2", "name": "Second"}))
        await local_store.save_project(sample_project.model_copy(update={"name": "Renamed"}))

        projects = (await local_store.fetch_projects()).value
        assert [(p.id, p.name) for p in projects] == [("p1", "Renamed"), ("p2", "Second")]

    @pytest.mark.asyncio
    async def test_fetch_preserves_stored_order(self, local_store: LocalStore) -> None:
        for project_id, start in [("b", "2023-01-01"), ("a", "2025-01-01"), ("c", "2024-01-01")]:
            await local_store.save_project(Project(id=project_id, name=project_id, start_date=start))

        projects = (await local_store.fetch_projects()).value
        assert [p.id for p in projects] == ["b", "a", "c"]

    @pytest.mark.asyncio
    async def test_save_overwrites_caller_timestamp(
        self, local_store: LocalStore, sample_project: Project
    ) -> None:
        stale = sample_project.model_copy(update={"updated_at": "2000-01-01T00:00:00.000Z"})
        before = datetime.now().astimezone()

        result = await local_store.save_project(stale)

        assert result.ok is True
        assert _parse(result.value.updated_at) >= before.replace(microsecond=0)
        stored = (await local_store.fetch_projects()).value[0]
        assert stored.updated_at == result.value.updated_at

    @pytest.mark.asyncio
    async def test_save_keeps_team_snapshots(self, local_store: LocalStore, sample_project: Project) -> None:
        await local_store.save_project(sample_project)

        stored = (await local_store.fetch_projects()).value[0]
        assert stored.team == sample_project.team

    @pytest.mark.asyncio
    async def test_delete_removes_matching_project(
        self, local_store: LocalStore, sample_project: Project
    ) -> None:
        await local_store.save_project(sample_project)

        result = await local_store.delete_project("p1")

        assert result.ok is True
        assert (await local_store.fetch_projects()).value == []

    @pytest.mark.asyncio
    async def test_delete_absent_id_is_noop(self, local_store: LocalStore, sample_project: Project) -> None:
        await local_store.save_project(sample_project)
        before = (await local_store.fetch_projects()).value

        result = await local_store.delete_project("does-not-exist")

        assert result.ok is True
        assert (await local_store.fetch_projects()).value == before

    @pytest.mark.asyncio
    async def test_delete_on_empty_store_writes_nothing(
        self, local_store: LocalStore, local_settings
    ) -> None:
        await local_store.delete_project("p1")

        assert await local_store.has_key(local_settings.projects_key) is False


class TestMasterData:
    """Test suite for customer and employee collections."""

    @pytest.mark.asyncio
    async def test_deleting_customer_does_not_cascade(
        self, local_store: LocalStore, sample_customer: Customer, sample_project: Project
    ) -> None:
        await local_store.save_customer(sample_customer)
        await local_store.save_project(sample_project)
        await local_store.save_project(sample_project.model_copy(update={"id": "p2"}))

        await local_store.delete_customer("c1")

        assert (await local_store.fetch_customers()).value == []
        projects = (await local_store.fetch_projects()).value
        assert [(p.id, p.customer_id) for p in projects] == [("p1", "c1"), ("p2", "c1")]

    @pytest.mark.asyncio
    async def test_employee_edit_does_not_touch_team_snapshots(
        self, local_store: LocalStore, sample_project: Project
    ) -> None:
        await local_store.save_employee(Employee(id="e1", name="Alice PM", role="PM"))
        await local_store.save_project(sample_project)

        await local_store.save_employee(Employee(id="e1", name="Alice Director", role="PM"))

        employees = (await local_store.fetch_employees()).value
        assert employees[0].name == "Alice Director"
        assert (await local_store.fetch_projects()).value[0].team[0].name == "Alice PM"

    @pytest.mark.asyncio
    async def test_delete_absent_employee_is_noop(
        self, local_store: LocalStore, sample_employee: Employee
    ) -> None:
        await local_store.save_employee(sample_employee)

        await local_store.delete_employee("nobody")

        assert len((await local_store.fetch_employees()).value) == 1


class TestFailureConversion:
    """Test suite for backend failures turning into failed results."""

    @pytest.mark.asyncio
    async def test_read_failure_returns_empty_default(self, local_store: LocalStore) -> None:
        error = OperationalError("SELECT", {}, Exception("disk I/O error"))
        with patch.object(local_store, "read_collection", side_effect=error):
            result = await local_store.fetch_customers()

        assert result.ok is False
        assert result.value == []
        assert "disk I/O error" in result.error

    @pytest.mark.asyncio
    async def test_corrupt_blob_returns_failure(self, local_store: LocalStore, local_settings) -> None:
        await local_store.write_collection(local_settings.projects_key, [])
        async with local_store._session_factory() as db:
            await db.execute(
                text("UPDATE local_storage SET value = :value WHERE key = :key"),
                {"value": "{not json", "key": local_settings.projects_key},
            )
            await db.commit()

        result = await local_store.fetch_projects()

        assert result.ok is False
        assert result.value == []


class TestAuthentication:
    """Test suite for the fixed-credential sign-in."""

    @pytest.mark.asyncio
    async def test_session_absent_before_sign_in(self, local_store: LocalStore) -> None:
        assert await local_store.get_session() is None

    @pytest.mark.asyncio
    async def test_fixed_credentials_sign_in(self, local_store: LocalStore) -> None:
        session = await local_store.sign_in(FALLBACK_EMAIL, FALLBACK_PASSWORD)

        assert session.user.email == "admin@company.com"
        current = await local_store.get_session()
        assert current is not None
        assert current.access_token == "mock-token"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [("admin@company.com", "wrong"), ("someone@company.com", "admin"), ("", "")],
    )
    async def test_other_credentials_rejected(self, local_store: LocalStore, email: str, password: str) -> None:
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await local_store.sign_in(email, password)

        assert str(exc_info.value) == INVALID_CREDENTIALS_MESSAGE
        assert await local_store.get_session() is None

    @pytest.mark.asyncio
    async def test_sign_out_clears_session(self, local_store: LocalStore) -> None:
        await local_store.sign_in(FALLBACK_EMAIL, FALLBACK_PASSWORD)

        await local_store.sign_out()

        assert await local_store.get_session() is None

    @pytest.mark.asyncio
    async def test_sign_up_is_unsupported(self, local_store: LocalStore) -> None:
        with pytest.raises(UnsupportedOperationError):
            await local_store.sign_up("new@company.com", "pw")
