"""
API test fixtures.

The data store and assistant are replaced through app.dependency_overrides;
the lifespan is not entered so no real store is created.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from gm_tracker.api.deps.dependencies import get_assistant, get_data_store
from gm_tracker.api.main import create_app
from gm_tracker.boundary.store import DataStore
from gm_tracker.core.assistant import PortfolioAssistant
from gm_tracker.models import StoreResult


def _echo(entity):
    return StoreResult.success(entity)


@pytest.fixture
def mock_store() -> MagicMock:
    """DataStore mock whose saves echo the entity and whose reads are empty."""
    store = MagicMock(spec=DataStore)
    store.backend_name = "local"
    store.fetch_projects.return_value = StoreResult.success([])
    store.fetch_customers.return_value = StoreResult.success([])
    store.fetch_employees.return_value = StoreResult.success([])
    store.save_project.side_effect = _echo
    store.save_customer.side_effect = _echo
    store.save_employee.side_effect = _echo
    store.delete_project.return_value = StoreResult.success()
    store.delete_customer.return_value = StoreResult.success()
    store.delete_employee.return_value = StoreResult.success()
    store.get_session.return_value = None
    return store


@pytest.fixture
def mock_assistant() -> MagicMock:
    assistant = MagicMock(spec=PortfolioAssistant)
    assistant.get_portfolio_analysis = AsyncMock(return_value="Portfolio summary")
    assistant.get_project_report = AsyncMock(return_value="Dear stakeholders")
    return assistant


@pytest.fixture
def client(mock_store: MagicMock, mock_assistant: MagicMock) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_data_store] = lambda: mock_store
    app.dependency_overrides[get_assistant] = lambda: mock_assistant
    return TestClient(app)
