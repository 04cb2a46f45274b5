"""
Employee master API endpoints.

Routes: GET /employees, POST /employees, PUT /employees/{id}, DELETE /employees/{id}

Dependencies: gm_tracker.boundary.store, gm_tracker.models
System role: Team master HTTP API
"""

from fastapi import APIRouter, Depends

from gm_tracker.api.deps.dependencies import get_data_store
from gm_tracker.api.routers.error_handling import handle_tracker_errors, raise_for_result
from gm_tracker.api.routers.router_utils import as_update, find_by_id
from gm_tracker.boundary.store import DataStore
from gm_tracker.models.employee import Employee

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
@handle_tracker_errors
async def list_employees(store: DataStore = Depends(get_data_store)) -> list[Employee]:
    return (await store.fetch_employees()).unwrap_or([])


@router.post("", response_model=Employee, status_code=201)
@handle_tracker_errors
async def create_employee(
    employee: Employee,
    store: DataStore = Depends(get_data_store),
) -> Employee:
    return raise_for_result(await store.save_employee(employee), "save", "team_members")


@router.put("/{employee_id}", response_model=Employee)
@handle_tracker_errors
async def update_employee(
    employee_id: str,
    employee: Employee,
    store: DataStore = Depends(get_data_store),
) -> Employee:
    """Update an employee; existing team snapshots are not touched."""
    employees = (await store.fetch_employees()).unwrap_or([])
    existing = find_by_id(employees, employee_id, "Employee")
    return raise_for_result(
        await store.save_employee(as_update(employee, existing)), "save", "team_members"
    )


@router.delete("/{employee_id}", status_code=204)
@handle_tracker_errors
async def delete_employee(
    employee_id: str,
    store: DataStore = Depends(get_data_store),
) -> None:
    raise_for_result(await store.delete_employee(employee_id), "delete", "team_members")
