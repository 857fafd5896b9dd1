"""
Service layer for customers.

``CustomerService`` mediates between API handlers and a
``CustomerRepository``.  Its rules are small: new customers are
timestamped, deletion is soft (the ``active`` flag is cleared and the
row is kept) and an update only copies the descriptive fields
``name``, ``email``, ``contact`` and ``address``.

Errors raised by the repository are not caught here; they reach the
caller unchanged.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from inventory_api.app.core.exceptions import CustomerNotFoundError
from inventory_api.app.repositories.customer_repository import CustomerRepository
from inventory_api.app.schemas.customer import Customer

logger = logging.getLogger(__name__)

# Fields copied from the input by ``update_customer``.
UPDATABLE_FIELDS = ("name", "email", "contact", "address")


class CustomerService:
    """Business operations on customer records."""

    def __init__(self, repository: CustomerRepository) -> None:
        self.repository = repository

    def get_all_customers(self) -> List[Customer]:
        """Return every stored customer, active or not."""
        return self.repository.find_all()

    def get_customer_by_id(self, customer_id: str) -> Optional[Customer]:
        """Return the customer with ``customer_id`` or ``None``."""
        return self.repository.find_by_id(customer_id)

    def save_customer(self, customer: Customer) -> Customer:
        """Persist ``customer`` as is, inserting or overwriting."""
        return self.repository.save(customer)

    def update_customer(self, customer: Customer) -> Customer:
        """Copy the descriptive fields of ``customer`` onto the stored record.

        The stored ``active`` flag and ``added`` timestamp are kept.
        Fields left as ``None`` on the input clear the stored value.

        Raises
        ------
        CustomerNotFoundError
            If no customer with ``customer.customer_id`` exists.  Nothing
            is written in that case.
        """
        existing = self.repository.find_by_id(customer.customer_id)
        if existing is None:
            logger.info("Update skipped, customer %s not found", customer.customer_id)
            raise CustomerNotFoundError(customer.customer_id)
        for field in UPDATABLE_FIELDS:
            setattr(existing, field, getattr(customer, field))
        updated = self.repository.save(existing)
        logger.info("Updated customer %s", updated.customer_id)
        return updated

    def delete_customer(self, customer_id: str) -> None:
        """Soft-delete a customer by clearing its ``active`` flag.

        A missing id is ignored.
        """
        existing = self.repository.find_by_id(customer_id)
        if existing is None:
            logger.debug("Delete ignored, customer %s not found", customer_id)
            return
        existing.active = False
        self.repository.save(existing)
        logger.info("Deactivated customer %s", customer_id)

    def add_new_customer(self, customer: Customer) -> Customer:
        """Stamp ``added`` with the current UTC time and persist.

        Does not check whether ``customer_id`` is already taken.
        """
        customer.added = datetime.now(timezone.utc)
        created = self.repository.save(customer)
        logger.info("Added customer %s", created.customer_id)
        return created

    def get_customer_by_name(self, name: str) -> Optional[Customer]:
        """Return the first customer (in insertion order) named exactly ``name``."""
        return self.repository.find_by_name(name)

    def find_customers_by_active(self) -> List[Customer]:
        return self.repository.find_all_by_active(True)
