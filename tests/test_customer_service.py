"""CustomerService behaviour against a real SQLite repository."""

from datetime import datetime, timedelta, timezone

import pytest

from inventory_api.app.core.exceptions import CustomerNotFoundError, InventoryError
from inventory_api.app.schemas.customer import Customer
from inventory_api.app.services.customer_service import CustomerService


def make_customer(customer_id="c1", name="Ann", **fields) -> Customer:
    defaults = {
        "email": f"{name.lower()}@example.com",
        "contact": "555-0100",
        "address": "1 Main St",
    }
    defaults.update(fields)
    return Customer(customer_id=customer_id, name=name, **defaults)


def test_get_all_customers_empty(service):
    assert service.get_all_customers() == []


def test_get_all_customers_keeps_insertion_order(service):
    for cid in ("c3", "c1", "c2"):
        service.save_customer(make_customer(cid, name=cid.upper()))
    assert [c.customer_id for c in service.get_all_customers()] == ["c3", "c1", "c2"]


def test_get_all_customers_includes_inactive(service):
    service.save_customer(make_customer("c1"))
    service.save_customer(make_customer("c2", name="Bob", active=False))
    assert {c.customer_id for c in service.get_all_customers()} == {"c1", "c2"}


def test_saved_customer_is_returned_unchanged(service):
    customer = make_customer(added=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc))
    saved = service.save_customer(customer)
    assert saved == customer
    assert service.get_customer_by_id("c1") == customer


def test_save_overwrites_existing_record(service):
    service.save_customer(make_customer(name="Ann"))
    service.save_customer(make_customer(name="Anne", active=False))
    stored = service.get_customer_by_id("c1")
    assert stored.name == "Anne"
    assert stored.active is False
    assert len(service.get_all_customers()) == 1


def test_save_assigns_id_when_missing(service):
    saved = service.save_customer(Customer(name="NoId"))
    assert saved.customer_id
    assert service.get_customer_by_id(saved.customer_id).name == "NoId"


def test_get_customer_by_id_missing_returns_none(service):
    assert service.get_customer_by_id("nope") is None


def test_add_new_customer_stamps_added(service):
    before = datetime.now(timezone.utc)
    created = service.add_new_customer(make_customer(added=None))
    assert created.added is not None
    assert created.added >= before
    assert service.get_customer_by_id("c1").added == created.added


def test_add_new_customer_replaces_caller_timestamp(service):
    old = datetime.now(timezone.utc) - timedelta(days=30)
    created = service.add_new_customer(make_customer(added=old))
    assert created.added > old


def test_add_new_customer_does_not_check_collisions(service):
    service.add_new_customer(make_customer(name="Ann"))
    service.add_new_customer(make_customer(name="Other"))
    assert [c.name for c in service.get_all_customers()] == ["Other"]


def test_update_changes_only_descriptive_fields(service):
    added = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    service.save_customer(make_customer(active=False, added=added))

    update = Customer(
        customer_id="c1",
        name="Ann Smith",
        email="ann.smith@example.com",
        contact="555-0199",
        address="2 High St",
        active=True,
        added=datetime(2030, 1, 1, tzinfo=timezone.utc),
    )
    updated = service.update_customer(update)

    assert updated.customer_id == "c1"
    assert updated.name == "Ann Smith"
    assert updated.email == "ann.smith@example.com"
    assert updated.contact == "555-0199"
    assert updated.address == "2 High St"
    assert updated.active is False
    assert updated.added == added
    assert service.get_customer_by_id("c1") == updated


def test_update_copies_empty_fields(service):
    service.save_customer(make_customer())
    updated = service.update_customer(Customer(customer_id="c1", name="Ann"))
    assert updated.email is None
    assert updated.contact is None
    assert updated.address is None


def test_update_missing_customer_raises_without_writing(service, repository):
    with pytest.raises(CustomerNotFoundError) as excinfo:
        service.update_customer(make_customer("ghost"))
    assert excinfo.value.customer_id == "ghost"
    assert isinstance(excinfo.value, InventoryError)
    assert repository.saved == []
    assert service.get_all_customers() == []


def test_delete_soft_deletes(service):
    service.save_customer(make_customer())
    service.delete_customer("c1")
    stored = service.get_customer_by_id("c1")
    assert stored is not None
    assert stored.active is False
    assert stored.name == "Ann"


def test_delete_missing_customer_is_noop(service, repository):
    service.save_customer(make_customer())
    repository.saved.clear()

    service.delete_customer("ghost")

    assert repository.saved == []
    assert [c.customer_id for c in service.get_all_customers()] == ["c1"]
    assert service.get_customer_by_id("ghost") is None


def test_delete_already_inactive_customer(service):
    service.save_customer(make_customer(active=False))
    service.delete_customer("c1")
    assert service.get_customer_by_id("c1").active is False


def test_get_customer_by_name_exact_match(service):
    service.save_customer(make_customer("c1", name="Ann"))
    service.save_customer(make_customer("c2", name="Bob"))
    assert service.get_customer_by_name("Bob").customer_id == "c2"
    assert service.get_customer_by_name("ann") is None
    assert service.get_customer_by_name("An") is None


def test_get_customer_by_name_returns_first_inserted(service):
    service.save_customer(make_customer("c2", name="Ann"))
    service.save_customer(make_customer("c1", name="Ann"))
    assert service.get_customer_by_name("Ann").customer_id == "c2"


def test_find_customers_by_active(service):
    service.save_customer(make_customer("c1", name="Ann"))
    service.save_customer(make_customer("c2", name="Bob", active=False))
    service.save_customer(make_customer("c3", name="Cid"))
    service.delete_customer("c3")
    service.save_customer(make_customer("c4", name="Dee"))

    active = service.find_customers_by_active()

    assert [c.customer_id for c in active] == ["c1", "c4"]
    assert all(c.active for c in active)


def test_scenario_delete_then_fetch(service):
    service.save_customer(Customer(customer_id="c1", name="Ann", active=True))
    service.delete_customer("c1")
    fetched = service.get_customer_by_id("c1")
    assert fetched.customer_id == "c1"
    assert fetched.active is False


class _BrokenRepository:
    def find_all(self):
        raise RuntimeError("storage offline")

    def find_by_id(self, customer_id):
        raise RuntimeError("storage offline")


def test_repository_errors_propagate():
    service = CustomerService(_BrokenRepository())
    with pytest.raises(RuntimeError, match="storage offline"):
        service.get_all_customers()
    with pytest.raises(RuntimeError, match="storage offline"):
        service.delete_customer("c1")
