"""
Project API endpoints.

Routes:
- GET /projects - List projects (status, search, sort_by filters)
- POST /projects - Create project
- GET /projects/draft - Blank project with form defaults
- GET /projects/{id} - Get single project
- PUT /projects/{id} - Update project
- DELETE /projects/{id} - Delete project
- POST /projects/{id}/team - Assign an employee to the team
- DELETE /projects/{id}/team/{index} - Remove a team member
- GET /projects/{id}/report - Draft a stakeholder status email

Dependencies: gm_tracker.application.services, gm_tracker.models
System role: Project management HTTP API
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends

from gm_tracker.api.deps.dependencies import (
    get_assistant,
    get_project_service,
    get_team_service,
)
from gm_tracker.api.routers.error_handling import handle_tracker_errors, raise_for_result
from gm_tracker.api.routers.router_utils import as_update
from gm_tracker.application.services import ProjectService, TeamService
from gm_tracker.core.assistant import PortfolioAssistant
from gm_tracker.core.exceptions import NotFoundError
from gm_tracker.models.project import Project, ReportResponse, TeamAssignmentRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


async def _require_project(service: ProjectService, project_id: str) -> Project:
    project = await service.get(project_id)
    if project is None:
        raise NotFoundError("Project", project_id)
    return project


@router.get("", response_model=list[Project])
@handle_tracker_errors
async def list_projects(
    status: str = "ALL",
    search: str = "",
    sort_by: Literal["date", "value"] = "date",
    project_service: ProjectService = Depends(get_project_service),
) -> list[Project]:
    """
    List projects with the list view filters applied.

    Args:
        status: Status to keep, or "ALL"
        search: Substring of project or customer name
        sort_by: "date" or "value"
        project_service: Injected ProjectService

    Returns:
        list[Project]: Matching projects
    """
    return await project_service.list_projects(status=status, search=search, sort_by=sort_by)


@router.post("", response_model=Project, status_code=201)
@handle_tracker_errors
async def create_project(
    project: Project,
    project_service: ProjectService = Depends(get_project_service),
) -> Project:
    """
    Create a project.

    Raises:
        HTTPException(400): Name or customer missing
        HTTPException(502): Store rejected the write
    """
    result = await project_service.save(project)
    return raise_for_result(result, "save", "projects")


@router.get("/draft", response_model=Project)
async def new_project_draft() -> Project:
    """Blank project pre-filled with form defaults."""
    return ProjectService.new_draft()


@router.get("/{project_id}", response_model=Project)
@handle_tracker_errors
async def get_project(
    project_id: str,
    project_service: ProjectService = Depends(get_project_service),
) -> Project:
    """Get a single project."""
    return await _require_project(project_service, project_id)


@router.put("/{project_id}", response_model=Project)
@handle_tracker_errors
async def update_project(
    project_id: str,
    project: Project,
    project_service: ProjectService = Depends(get_project_service),
) -> Project:
    """
    Update an existing project.

    Raises:
        HTTPException(404): Project not found
        HTTPException(400): Name or customer missing
        HTTPException(502): Store rejected the write
    """
    existing = await _require_project(project_service, project_id)
    result = await project_service.save(as_update(project, existing))
    return raise_for_result(result, "save", "projects")


@router.delete("/{project_id}", status_code=204)
@handle_tracker_errors
async def delete_project(
    project_id: str,
    project_service: ProjectService = Depends(get_project_service),
) -> None:
    """Delete a project."""
    raise_for_result(await project_service.delete(project_id), "delete", "projects")


@router.post("/{project_id}/team", response_model=Project)
@handle_tracker_errors
async def assign_team_member(
    project_id: str,
    request: TeamAssignmentRequest,
    team_service: TeamService = Depends(get_team_service),
) -> Project:
    """
    Snapshot an employee onto the project team.

    Raises:
        HTTPException(404): Project or employee not found
        HTTPException(400): Employee already assigned
    """
    result = await team_service.assign(project_id, request.employee_id)
    return raise_for_result(result, "save", "projects")


@router.delete("/{project_id}/team/{index}", response_model=Project)
@handle_tracker_errors
async def remove_team_member(
    project_id: str,
    index: int,
    team_service: TeamService = Depends(get_team_service),
) -> Project:
    """Remove the team member at the given position."""
    result = await team_service.unassign(project_id, index)
    return raise_for_result(result, "save", "projects")


@router.get("/{project_id}/report", response_model=ReportResponse)
@handle_tracker_errors
async def get_project_report(
    project_id: str,
    project_service: ProjectService = Depends(get_project_service),
    assistant: PortfolioAssistant = Depends(get_assistant),
) -> ReportResponse:
    """Draft a stakeholder status email for the project."""
    project = await _require_project(project_service, project_id)
    return ReportResponse(text=await assistant.get_project_report(project))
