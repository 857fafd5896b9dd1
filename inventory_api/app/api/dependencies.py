"""
API dependencies.

Builds the service objects handed to endpoint functions.  Tests replace
``get_customer_service`` through ``app.dependency_overrides`` to point
the API at a temporary database.
"""

from fastapi import Depends

from inventory_api.app.repositories.customer_repository import (
    CustomerRepository,
    SQLiteCustomerRepository,
)
from inventory_api.app.services.customer_service import CustomerService


def get_customer_repository() -> CustomerRepository:
    """Repository bound to the configured database."""
    return SQLiteCustomerRepository()


def get_customer_service(
    repository: CustomerRepository = Depends(get_customer_repository),
) -> CustomerService:
    return CustomerService(repository)
