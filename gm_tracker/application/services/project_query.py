"""
Project list filtering and sorting.

Dependencies: gm_tracker.models
System role: Project list view query
"""

from datetime import datetime
from typing import Literal

from gm_tracker.models.project import Project

ALL_STATUSES = "ALL"

SortKey = Literal["date", "value"]


def _status_text(project: Project) -> str:
    return getattr(project.status, "value", project.status)


def _start_date_key(project: Project) -> datetime:
    # Unparseable dates sort as oldest
    try:
        parsed = datetime.fromisoformat(project.start_date.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return datetime.min
    return parsed.replace(tzinfo=None)


def filter_projects(
    projects: list[Project],
    status: str = ALL_STATUSES,
    search: str = "",
    sort_by: SortKey = "date",
) -> list[Project]:
    """
    Filter and sort projects for the list view.

    Args:
        projects: Projects as fetched from the store
        status: Status value to keep, or "ALL"
        search: Case-insensitive substring of project or customer name
        sort_by: "date" (start date, newest first) or "value" (highest first)

    Returns:
        list[Project]: Filtered, sorted projects
    """
    needle = (search or "").strip().lower()

    selected = [
        p
        for p in projects
        if (status == ALL_STATUSES or _status_text(p) == status)
        and (
            not needle
            or needle in p.name.lower()
            or needle in p.customer_name.lower()
        )
    ]

    if sort_by == "value":
        return sorted(selected, key=lambda p: p.value, reverse=True)
    return sorted(selected, key=_start_date_key, reverse=True)
