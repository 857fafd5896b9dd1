"""
Data access layer.

Repositories expose storage operations for a single entity type.  The
``CustomerRepository`` protocol lists what the service layer relies on;
``SQLiteCustomerRepository`` implements it on top of ``core.db``.
"""

from .customer_repository import CustomerRepository, SQLiteCustomerRepository

__all__ = ["CustomerRepository", "SQLiteCustomerRepository"]
