"""
Dashboard statistics models.

Dependencies: pydantic
System role: Portfolio statistics response contracts
"""

from pydantic import Field

from gm_tracker.models.common import CamelModel


class StatusSlice(CamelModel):
    """Project count for one status with its chart color."""

    name: str
    value: int
    color: str


class CustomerRanking(CamelModel):
    """Project count and total value for one customer."""

    name: str
    count: int
    value: float


class DashboardStats(CamelModel):
    """Aggregated portfolio statistics."""

    total_projects: int = 0
    total_value: float = 0.0
    total_value_display: str = "Rp 0"
    status_distribution: list[StatusSlice] = Field(default_factory=list)
    top_customers: list[CustomerRanking] = Field(default_factory=list)
