"""Shared fixtures: a migrated temporary database and the objects built on it."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from inventory_api.app.api.dependencies import get_customer_service
from inventory_api.app.core.db import init_db
from inventory_api.app.main import create_app
from inventory_api.app.repositories.customer_repository import SQLiteCustomerRepository
from inventory_api.app.schemas.customer import Customer
from inventory_api.app.services.customer_service import CustomerService


class RecordingRepository:
    """Wraps a repository and remembers every customer passed to ``save``."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self.saved: List[Customer] = []

    def find_all(self) -> List[Customer]:
        return self.inner.find_all()

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        return self.inner.find_by_id(customer_id)

    def save(self, customer: Customer) -> Customer:
        self.saved.append(customer.model_copy())
        return self.inner.save(customer)

    def find_by_name(self, name: str) -> Optional[Customer]:
        return self.inner.find_by_name(name)

    def find_all_by_active(self, active: bool) -> List[Customer]:
        return self.inner.find_all_by_active(active)


@pytest.fixture
def db_path(tmp_path) -> str:
    path = str(tmp_path / "inventory-test.db")
    init_db(path)
    return path


@pytest.fixture
def repository(db_path) -> RecordingRepository:
    return RecordingRepository(SQLiteCustomerRepository(db_path))


@pytest.fixture
def service(repository) -> CustomerService:
    return CustomerService(repository)


@pytest.fixture
def client(service) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_customer_service] = lambda: service
    return TestClient(app)
