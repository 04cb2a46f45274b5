"""
Fallback store seeding.

Writes example master data and one example project into an empty local
store. Invoked once by the composition root; never runs on import and
never touches the remote backend.

Dependencies: gm_tracker.boundary.store
System role: Bootstrap data for fallback mode
"""

import logging

from gm_tracker.boundary.store.base import DataStore, utc_now_iso
from gm_tracker.boundary.store.local_store import LocalStore
from gm_tracker.models.customer import Customer
from gm_tracker.models.employee import Employee, EmployeeRole, EmployeeStatus
from gm_tracker.models.project import Project, ProjectStatus, ProjectType, TeamMember

logger = logging.getLogger(__name__)


def seed_customers() -> list[Customer]:
    return [
        Customer(id="c1", name="Acme Corp", address="123 Tech Blvd", contact_person="John Doe"),
        Customer(id="c2", name="Global Industries", address="456 Biz Way", contact_person="Jane Smith"),
    ]


def seed_employees() -> list[Employee]:
    return [
        Employee(id="e1", name="Alice PM", role=EmployeeRole.PM, status=EmployeeStatus.ACTIVE),
        Employee(id="e2", name="Bob Sales", role=EmployeeRole.SALES, status=EmployeeStatus.ACTIVE),
        Employee(id="e3", name="Charlie Tech", role=EmployeeRole.ENGINEER, status=EmployeeStatus.ACTIVE),
    ]


def seed_projects() -> list[Project]:
    return [
        Project(
            id="p1",
            name="ERP Migration 2024",
            customer_id="c1",
            customer_name="Acme Corp",
            location="Jakarta",
            start_date="2024-01-15",
            status=ProjectStatus.ON_PROGRESS,
            value=150000000,
            type=ProjectType.SOFTWARE,
            description="Migrating legacy ERP to Cloud.",
            notes="Waiting for final data validation from client side.",
            team=[
                TeamMember(role=EmployeeRole.PM, name="Alice PM", employee_id="e1"),
                TeamMember(role=EmployeeRole.ENGINEER, name="Charlie Tech", employee_id="e3"),
            ],
            updated_at=utc_now_iso(),
        )
    ]


async def ensure_seeded(store: DataStore) -> bool:
    """
    Seed the fallback store when it has never held projects.

    Args:
        store: Active data store

    Returns:
        bool: True if seed data was written
    """
    if not isinstance(store, LocalStore):
        return False

    settings = store.settings
    if await store.has_key(settings.projects_key):
        return False

    await store.write_collection(settings.customers_key, seed_customers())
    await store.write_collection(settings.employees_key, seed_employees())
    await store.write_collection(settings.projects_key, seed_projects())
    logger.info("Seeded local store", extra={"key_prefix": settings.key_prefix})
    return True
