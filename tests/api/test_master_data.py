"""Tests for the customer and employee endpoints."""

from fastapi.testclient import TestClient

from gm_tracker.models import Customer, Employee, IdentityState, StoreResult


def test_list_customers(client: TestClient, mock_store):
    mock_store.fetch_customers.return_value = StoreResult.success(
        [Customer(id="c1", name="Acme Corp", contact_person="John Doe")]
    )

    response = client.get("/api/v1/customers")

    assert response.status_code == 200
    assert response.json()[0]["contactPerson"] == "John Doe"


def test_create_customer(client: TestClient, mock_store):
    response = client.post("/api/v1/customers", json={"name": "Globex", "contactPerson": "Hank"})

    assert response.status_code == 201
    saved = mock_store.save_customer.await_args.args[0]
    assert saved.identity == IdentityState.UNASSIGNED
    assert saved.contact_person == "Hank"


def test_create_customer_store_failure(client: TestClient, mock_store):
    mock_store.save_customer.side_effect = None
    mock_store.save_customer.return_value = StoreResult.failure("permission denied")

    response = client.post("/api/v1/customers", json={"name": "Globex"})

    assert response.status_code == 502
    assert "permission denied" in response.json()["detail"]


def test_update_missing_customer(client: TestClient):
    response = client.put("/api/v1/customers/c9", json={"name": "Nobody"})

    assert response.status_code == 404


def test_delete_customer(client: TestClient, mock_store):
    response = client.delete("/api/v1/customers/c1")

    assert response.status_code == 204
    mock_store.delete_customer.assert_awaited_once_with("c1")


def test_update_employee(client: TestClient, mock_store):
    mock_store.fetch_employees.return_value = StoreResult.success(
        [Employee(id="e1", name="Alice PM", role="PM", identity=IdentityState.PERSISTED)]
    )

    response = client.put("/api/v1/employees/e1", json={"name": "Alice Director", "role": "PM"})

    assert response.status_code == 200
    assert response.json()["name"] == "Alice Director"
    assert mock_store.save_employee.await_args.args[0].is_persisted


def test_employee_unknown_role_passes_through(client: TestClient):
    response = client.post("/api/v1/employees", json={"name": "Dana", "role": "Architect"})

    assert response.status_code == 201
    assert response.json()["role"] == "Architect"


def test_delete_employee(client: TestClient, mock_store):
    response = client.delete("/api/v1/employees/e1")

    assert response.status_code == 204
