"""
Customer endpoints for API v1.

Thin HTTP wrappers around ``CustomerService``.  Deleting a customer is
a soft delete: the record stays retrievable by id with
``active = false``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from inventory_api.app.api.dependencies import get_customer_service
from inventory_api.app.core.exceptions import CustomerNotFoundError
from inventory_api.app.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from inventory_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.get("/", response_model=List[Customer])
def list_customers(
    name: Optional[str] = Query(None, min_length=1, description="Exact name to look up"),
    active_only: bool = Query(False, description="Skip deactivated customers"),
    service: CustomerService = Depends(get_customer_service),
) -> List[Customer]:
    """Return customers, optionally narrowed down.

    Without filters every customer is returned, including deactivated
    ones.  ``name`` yields at most one customer: the earliest registered
    one with exactly that name.  It takes precedence over
    ``active_only``.  The filters are query parameters so that no
    customer id is shadowed by a fixed path.
    """
    if name is not None:
        customer = service.get_customer_by_name(name)
        return [customer] if customer is not None else []
    if active_only:
        return service.find_customers_by_active()
    return service.get_all_customers()


@router.get("/{customer_id:path}", response_model=Customer)
def get_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)) -> Customer:
    customer = service.get_customer_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.post("/", response_model=Customer, status_code=status.HTTP_201_CREATED)
def add_customer(
    customer_in: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    """Register a new customer; ``added`` is set by the server."""
    return service.add_new_customer(customer_in.to_customer())


@router.put("/", response_model=Customer)
def update_customer(
    customer_in: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    """Replace name, email, contact and address of an existing customer."""
    try:
        return service.update_customer(customer_in.to_customer())
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.delete("/{customer_id:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)) -> None:
    """Deactivate a customer.  Unknown ids are accepted and ignored."""
    service.delete_customer(customer_id)
    return None
