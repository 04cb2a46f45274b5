"""
Application services.

Exports the console use-case services and query helpers.
"""

from gm_tracker.application.services.dashboard_service import DashboardService
from gm_tracker.application.services.formatting import format_currency
from gm_tracker.application.services.project_query import filter_projects
from gm_tracker.application.services.project_service import ProjectService
from gm_tracker.application.services.team_service import TeamService

__all__ = [
    "DashboardService",
    "ProjectService",
    "TeamService",
    "filter_projects",
    "format_currency",
]
