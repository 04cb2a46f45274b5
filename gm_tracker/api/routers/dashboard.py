"""
Dashboard API endpoints.

Routes: GET /dashboard, GET /dashboard/analysis

Dependencies: gm_tracker.application.services
System role: Portfolio overview HTTP API
"""

from fastapi import APIRouter, Depends

from gm_tracker.api.deps.dependencies import get_dashboard_service
from gm_tracker.api.routers.error_handling import handle_tracker_errors
from gm_tracker.application.services import DashboardService
from gm_tracker.models.dashboard import DashboardStats
from gm_tracker.models.project import ReportResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
@handle_tracker_errors
async def get_dashboard(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStats:
    """Portfolio totals, status distribution and top customers."""
    return await dashboard_service.get_stats()


@router.get("/analysis", response_model=ReportResponse)
@handle_tracker_errors
async def get_portfolio_analysis(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> ReportResponse:
    """Executive summary of the portfolio from the AI assistant."""
    return ReportResponse(text=await dashboard_service.get_analysis())
