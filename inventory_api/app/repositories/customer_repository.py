"""
Persistence for customer records.

``CustomerRepository`` is the contract the service layer depends on.
``SQLiteCustomerRepository`` implements it with the connection helpers
from ``core.db``; every call opens its own connection, so instances can
be shared between requests.

All queries use parameterized statements.  Results are returned in
insertion order (SQLite ``rowid``).
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from typing import List, Optional, Protocol

from inventory_api.app.core.db import get_connection
from inventory_api.app.schemas.customer import Customer

logger = logging.getLogger(__name__)

_COLUMNS = "customer_id, name, email, contact, address, active, added"


class CustomerRepository(Protocol):
    """Storage operations required by ``CustomerService``."""

    def find_all(self) -> List[Customer]:
        ...

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        ...

    def save(self, customer: Customer) -> Customer:
        ...

    def find_by_name(self, name: str) -> Optional[Customer]:
        ...

    def find_all_by_active(self, active: bool) -> List[Customer]:
        ...


class SQLiteCustomerRepository:
    """Customer repository backed by the ``customers`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        # ``None`` means the path configured in settings.
        self.db_path = db_path

    def find_all(self) -> List[Customer]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM customers ORDER BY rowid").fetchall()
            return [self._row_to_customer(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM customers WHERE customer_id = ?",
                (customer_id,),
            ).fetchone()
            return self._row_to_customer(row) if row else None
        finally:
            conn.close()

    def save(self, customer: Customer) -> Customer:
        """Insert or overwrite a customer and return the stored record.

        A customer without ``customer_id`` gets a fresh uuid4 hex id.  An
        existing row keeps its position in the insertion order.
        """
        stored = customer.model_copy()
        if not stored.customer_id:
            stored.customer_id = uuid.uuid4().hex
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                f"""
                INSERT INTO customers ({_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(customer_id) DO UPDATE SET
                    name = excluded.name,
                    email = excluded.email,
                    contact = excluded.contact,
                    address = excluded.address,
                    active = excluded.active,
                    added = excluded.added
                """,
                (
                    stored.customer_id,
                    stored.name,
                    stored.email,
                    stored.contact,
                    stored.address,
                    1 if stored.active else 0,
                    stored.added.isoformat() if stored.added else None,
                ),
            )
            conn.commit()
            logger.debug("Saved customer %s", stored.customer_id)
            return stored
        finally:
            conn.close()

    def find_by_name(self, name: str) -> Optional[Customer]:
        """Return the earliest stored customer with exactly this name."""
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM customers WHERE name = ? ORDER BY rowid LIMIT 1",
                (name,),
            ).fetchone()
            return self._row_to_customer(row) if row else None
        finally:
            conn.close()

    def find_all_by_active(self, active: bool) -> List[Customer]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM customers WHERE active = ? ORDER BY rowid",
                (1 if active else 0,),
            ).fetchall()
            return [self._row_to_customer(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_customer(row: sqlite3.Row) -> Customer:
        """Convert a database row to a ``Customer``."""
        return Customer(
            customer_id=row["customer_id"],
            name=row["name"],
            email=row["email"],
            contact=row["contact"],
            address=row["address"],
            active=bool(row["active"]),
            added=row["added"],
        )
