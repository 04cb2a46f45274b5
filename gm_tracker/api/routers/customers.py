"""
Customer master API endpoints.

Routes: GET /customers, POST /customers, PUT /customers/{id}, DELETE /customers/{id}

Dependencies: gm_tracker.boundary.store, gm_tracker.models
System role: Customer master HTTP API
"""

from fastapi import APIRouter, Depends

from gm_tracker.api.deps.dependencies import get_data_store
from gm_tracker.api.routers.error_handling import handle_tracker_errors, raise_for_result
from gm_tracker.api.routers.router_utils import as_update, find_by_id
from gm_tracker.boundary.store import DataStore
from gm_tracker.models.customer import Customer

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[Customer])
@handle_tracker_errors
async def list_customers(store: DataStore = Depends(get_data_store)) -> list[Customer]:
    """List customers; a failed fetch renders as an empty list."""
    return (await store.fetch_customers()).unwrap_or([])


@router.post("", response_model=Customer, status_code=201)
@handle_tracker_errors
async def create_customer(
    customer: Customer,
    store: DataStore = Depends(get_data_store),
) -> Customer:
    """Create a customer."""
    return raise_for_result(await store.save_customer(customer), "save", "customers")


@router.put("/{customer_id}", response_model=Customer)
@handle_tracker_errors
async def update_customer(
    customer_id: str,
    customer: Customer,
    store: DataStore = Depends(get_data_store),
) -> Customer:
    """
    Update a customer.

    Project records keep their own copy of the customer name.
    """
    customers = (await store.fetch_customers()).unwrap_or([])
    existing = find_by_id(customers, customer_id, "Customer")
    return raise_for_result(
        await store.save_customer(as_update(customer, existing)), "save", "customers"
    )


@router.delete("/{customer_id}", status_code=204)
@handle_tracker_errors
async def delete_customer(
    customer_id: str,
    store: DataStore = Depends(get_data_store),
) -> None:
    """Delete a customer. Projects referencing it are left as they are."""
    raise_for_result(await store.delete_customer(customer_id), "delete", "customers")
