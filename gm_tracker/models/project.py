"""
Project domain models.

Project record with its embedded team snapshots, plus the status and
type vocabularies and the request shapes used by the console API.

Dependencies: pydantic
System role: Project data shape
"""

from enum import Enum

from pydantic import Field

from gm_tracker.models.common import CamelModel, TrackedEntity
from gm_tracker.models.employee import EmployeeRole


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    PLANNING = "Planning"
    ON_PROGRESS = "On Progress"
    DONE = "Done"
    HOLD = "On Hold"


class ProjectType(str, Enum):
    """Kind of engagement."""

    TURNKEY = "Turnkey"
    SOFTWARE = "Software"
    HARDWARE = "Hardware"
    MAINTENANCE = "Maintenance"


class TeamMember(CamelModel):
    """
    Snapshot of an employee assigned to a project.

    Role and name are copied at assignment time and may drift from the
    employee master afterwards.
    """

    role: EmployeeRole | str = Field(union_mode="left_to_right")
    name: str
    employee_id: str | None = None


class Project(TrackedEntity):
    """
    Project record.

    customer_name is a denormalized copy of the customer's name. The
    customer_id reference is not enforced by storage.
    """

    name: str
    customer_id: str = ""
    customer_name: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str | None = None
    status: ProjectStatus | str = Field(default=ProjectStatus.PLANNING, union_mode="left_to_right")
    value: float = 0.0
    type: ProjectType | str = Field(default=ProjectType.TURNKEY, union_mode="left_to_right")
    description: str = ""
    notes: str = ""
    team: list[TeamMember] = Field(default_factory=list)
    updated_at: str | None = None


class TeamAssignmentRequest(CamelModel):
    """Request schema for assigning an employee to a project team."""

    employee_id: str = Field(..., min_length=1, description="Employee master id")


class ReportResponse(CamelModel):
    """Generated text from the AI assistant."""

    text: str
