"""
Project team assignment.

Team members are snapshots of an employee (role, name, id) taken when
they are assigned; later edits to the employee master do not flow back.

Dependencies: gm_tracker.models, gm_tracker.boundary.store
System role: Team assignment use cases
"""

import logging

from gm_tracker.boundary.store.base import DataStore
from gm_tracker.core.exceptions import NotFoundError
from gm_tracker.models.common import StoreResult
from gm_tracker.models.employee import Employee
from gm_tracker.models.project import Project, TeamMember

logger = logging.getLogger(__name__)


class TeamService:
    """Assign employees to project teams and remove them again."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    @staticmethod
    def add_member(project: Project, employee: Employee) -> Project:
        """
        Return a copy of the project with the employee appended to its team.

        Args:
            project: Project to update
            employee: Employee to snapshot

        Returns:
            Project: Updated copy

        Raises:
            ValueError: If the employee is already on the team
        """
        if any(m.employee_id == employee.id for m in project.team):
            raise ValueError(f"Employee {employee.id} is already assigned to this project")

        member = TeamMember(role=employee.role, name=employee.name, employee_id=employee.id)
        return project.model_copy(update={"team": [*project.team, member]})

    @staticmethod
    def remove_member(project: Project, index: int) -> Project:
        """
        Return a copy of the project without the team member at ``index``.

        Raises:
            ValueError: If index is out of range
        """
        if index < 0 or index >= len(project.team):
            raise ValueError(f"Team member index {index} is out of range")

        team = list(project.team)
        del team[index]
        return project.model_copy(update={"team": team})

    async def _find_project(self, project_id: str) -> Project:
        projects = (await self.store.fetch_projects()).unwrap_or([])
        for project in projects:
            if project.id == project_id:
                return project
        raise NotFoundError("Project", project_id)

    async def assign(self, project_id: str, employee_id: str) -> StoreResult[Project]:
        """
        Snapshot an employee onto a stored project and save it.

        Raises:
            NotFoundError: If the project or employee does not exist
            ValueError: If the employee is already assigned
        """
        project = await self._find_project(project_id)

        employees = (await self.store.fetch_employees()).unwrap_or([])
        employee = next((e for e in employees if e.id == employee_id), None)
        if employee is None:
            raise NotFoundError("Employee", employee_id)

        updated = self.add_member(project, employee)
        logger.info(
            f"{__name__}:assign - Assigning employee",
            extra={"project_id": project_id, "employee_id": employee_id},
        )
        return await self.store.save_project(updated)

    async def unassign(self, project_id: str, index: int) -> StoreResult[Project]:
        """
        Remove the team member at ``index`` from a stored project and save it.

        Raises:
            NotFoundError: If the project does not exist
            ValueError: If index is out of range
        """
        project = await self._find_project(project_id)
        updated = self.remove_member(project, index)
        return await self.store.save_project(updated)
