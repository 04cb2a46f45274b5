"""
Dashboard service for portfolio statistics and AI analysis.

Dependencies: gm_tracker.boundary.store, gm_tracker.core.assistant
System role: Portfolio overview orchestration
"""

import logging
from collections import defaultdict

from gm_tracker.application.services.formatting import format_currency
from gm_tracker.boundary.store.base import DataStore
from gm_tracker.core.assistant.portfolio_assistant import PortfolioAssistant
from gm_tracker.models.dashboard import CustomerRanking, DashboardStats, StatusSlice
from gm_tracker.models.project import Project, ProjectStatus

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    ProjectStatus.PLANNING.value: "#94A3B8",
    ProjectStatus.ON_PROGRESS.value: "#1E88E5",
    ProjectStatus.DONE.value: "#43A047",
    ProjectStatus.HOLD.value: "#EF4444",
}
UNKNOWN_STATUS_COLOR = "#CBD5E1"
TOP_CUSTOMER_LIMIT = 5


class DashboardService:
    """Builds portfolio statistics and requests the executive summary."""

    def __init__(self, store: DataStore, assistant: PortfolioAssistant) -> None:
        self.store = store
        self.assistant = assistant

    @staticmethod
    def build_stats(projects: list[Project]) -> DashboardStats:
        """
        Aggregate totals, status distribution and top customers.

        Statuses appear in order of first occurrence; customers are ranked
        by project count, ties keeping first-seen order.

        Args:
            projects: Projects to aggregate

        Returns:
            DashboardStats: Aggregated statistics
        """
        status_counts: dict[str, int] = {}
        customer_counts: dict[str, int] = {}
        customer_values: dict[str, float] = defaultdict(float)

        for project in projects:
            status = getattr(project.status, "value", project.status)
            status_counts[status] = status_counts.get(status, 0) + 1
            customer_counts[project.customer_name] = customer_counts.get(project.customer_name, 0) + 1
            customer_values[project.customer_name] += project.value

        ranking = sorted(customer_counts.items(), key=lambda item: item[1], reverse=True)

        total_value = sum(p.value for p in projects)
        return DashboardStats(
            total_projects=len(projects),
            total_value=total_value,
            total_value_display=format_currency(total_value),
            status_distribution=[
                StatusSlice(name=name, value=count, color=STATUS_COLORS.get(name, UNKNOWN_STATUS_COLOR))
                for name, count in status_counts.items()
            ],
            top_customers=[
                CustomerRanking(name=name, count=count, value=customer_values[name])
                for name, count in ranking[:TOP_CUSTOMER_LIMIT]
            ],
        )

    async def get_stats(self) -> DashboardStats:
        """Fetch projects and aggregate them."""
        result = await self.store.fetch_projects()
        if not result.ok:
            logger.warning(f"{__name__}:get_stats - Project fetch failed: {result.error}")
        return self.build_stats(result.unwrap_or([]))

    async def get_analysis(self) -> str:
        """Fetch projects and ask the assistant for an executive summary."""
        projects = (await self.store.fetch_projects()).unwrap_or([])
        return await self.assistant.get_portfolio_analysis(projects)
