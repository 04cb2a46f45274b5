"""
Domain models and API schemas.

Exports entity models, vocabularies, identity/result types and the
auth and dashboard shapes.
"""

from gm_tracker.models.auth import AuthSession, CredentialsRequest, SessionResponse, SessionUser
from gm_tracker.models.common import CamelModel, IdentityState, StoreResult, TrackedEntity
from gm_tracker.models.customer import Customer
from gm_tracker.models.dashboard import CustomerRanking, DashboardStats, StatusSlice
from gm_tracker.models.employee import Employee, EmployeeRole, EmployeeStatus
from gm_tracker.models.project import (
    Project,
    ProjectStatus,
    ProjectType,
    ReportResponse,
    TeamAssignmentRequest,
    TeamMember,
)

__all__ = [
    "AuthSession",
    "CamelModel",
    "CredentialsRequest",
    "Customer",
    "CustomerRanking",
    "DashboardStats",
    "Employee",
    "EmployeeRole",
    "EmployeeStatus",
    "IdentityState",
    "Project",
    "ProjectStatus",
    "ProjectType",
    "ReportResponse",
    "SessionResponse",
    "SessionUser",
    "StatusSlice",
    "StoreResult",
    "TeamAssignmentRequest",
    "TeamMember",
    "TrackedEntity",
]
