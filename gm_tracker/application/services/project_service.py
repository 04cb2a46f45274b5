"""
Project service for draft, lookup and save use cases.

Applies the console's form rules (name and customer are required, the
customer name is copied from the customer master) before delegating to
the data gateway.

Dependencies: gm_tracker.boundary.store, gm_tracker.models
System role: Project management orchestration layer
"""

import logging
from datetime import date

from gm_tracker.application.services.project_query import SortKey, filter_projects
from gm_tracker.boundary.store.base import DataStore
from gm_tracker.models.common import StoreResult
from gm_tracker.models.project import Project, ProjectStatus, ProjectType

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Project service for the GM console.

    Coordinates presence checks, customer name resolution and store
    persistence for projects.
    """

    def __init__(self, store: DataStore) -> None:
        """
        Initialize project service.

        Args:
            store: Active data gateway
        """
        self.store = store

    @staticmethod
    def new_draft() -> Project:
        """
        Build an unsaved project with form defaults.

        Returns:
            Project: Draft with today's start date, Planning status and empty team
        """
        return Project(
            name="",
            customer_id="",
            customer_name="",
            start_date=date.today().isoformat(),
            status=ProjectStatus.PLANNING,
            value=0,
            type=ProjectType.TURNKEY,
            team=[],
        )

    async def list_projects(
        self,
        status: str = "ALL",
        search: str = "",
        sort_by: SortKey = "date",
    ) -> list[Project]:
        """Fetch projects and apply the list view filters."""
        result = await self.store.fetch_projects()
        if not result.ok:
            logger.warning(f"{__name__}:list_projects - Project fetch failed: {result.error}")
        return filter_projects(result.unwrap_or([]), status=status, search=search, sort_by=sort_by)

    async def get(self, project_id: str) -> Project | None:
        """
        Find a project by id in the fetched list.

        Args:
            project_id: Project identifier

        Returns:
            Project | None: Project if found
        """
        projects = (await self.store.fetch_projects()).unwrap_or([])
        return next((p for p in projects if p.id == project_id), None)

    async def save(self, project: Project) -> StoreResult[Project]:
        """
        Validate and persist a project.

        Args:
            project: Project from the form (new or existing)

        Returns:
            StoreResult[Project]: Gateway outcome

        Raises:
            ValueError: If name or customer id is missing
        """
        if not project.name.strip():
            raise ValueError("Project name is required")
        if not project.customer_id:
            raise ValueError("Customer is required")

        if not project.customer_name:
            customers = (await self.store.fetch_customers()).unwrap_or([])
            customer = next((c for c in customers if c.id == project.customer_id), None)
            if customer is not None:
                project = project.model_copy(update={"customer_name": customer.name})

        return await self.store.save_project(project)

    async def delete(self, project_id: str) -> StoreResult[None]:
        """Delete a project by id."""
        return await self.store.delete_project(project_id)
