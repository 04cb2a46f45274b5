"""API routers."""

from .auth import router as auth_router
from .customers import router as customers_router
from .dashboard import router as dashboard_router
from .employees import router as employees_router
from .health import router as health_router
from .projects import router as projects_router

__all__ = [
    "auth_router",
    "customers_router",
    "dashboard_router",
    "employees_router",
    "health_router",
    "projects_router",
]
