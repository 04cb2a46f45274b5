"""Tests for explicit fallback seeding."""

from unittest.mock import MagicMock

import pytest

from gm_tracker.boundary.store.base import DataStore
from gm_tracker.boundary.store.local_store import LocalStore
from gm_tracker.boundary.store.seed import ensure_seeded
from gm_tracker.models import EmployeeRole, Project, ProjectStatus, ProjectType


@pytest.mark.asyncio
async def test_seeding_empty_store_yields_single_example_project(local_store: LocalStore) -> None:
    assert await ensure_seeded(local_store) is True

    projects = (await local_store.fetch_projects()).value
    assert len(projects) == 1
    project = projects[0]
    assert project.name == "ERP Migration 2024"
    assert project.status == ProjectStatus.ON_PROGRESS
    assert project.value == 150000000
    assert project.type == ProjectType.SOFTWARE
    assert [m.employee_id for m in project.team] == ["e1", "e3"]


@pytest.mark.asyncio
async def test_seeding_writes_master_data(local_store: LocalStore) -> None:
    await ensure_seeded(local_store)

    customers = (await local_store.fetch_customers()).value
    employees = (await local_store.fetch_employees()).value
    assert [c.name for c in customers] == ["Acme Corp", "Global Industries"]
    assert [(e.id, e.role) for e in employees] == [
        ("e1", EmployeeRole.PM),
        ("e2", EmployeeRole.SALES),
        ("e3", EmployeeRole.ENGINEER),
    ]


@pytest.mark.asyncio
async def test_seeding_is_idempotent(local_store: LocalStore) -> None:
    await ensure_seeded(local_store)
    await local_store.save_project(Project(id="p2", name="Another", customer_id="c2"))

    assert await ensure_seeded(local_store) is False
    assert len((await local_store.fetch_projects()).value) == 2


@pytest.mark.asyncio
async def test_existing_empty_collection_is_not_reseeded(local_store: LocalStore) -> None:
    await ensure_seeded(local_store)
    await local_store.delete_project("p1")

    assert await ensure_seeded(local_store) is False
    assert (await local_store.fetch_projects()).value == []


@pytest.mark.asyncio
async def test_remote_store_is_never_seeded() -> None:
    remote = MagicMock(spec=DataStore)

    assert await ensure_seeded(remote) is False
    remote.save_project.assert_not_called()
