"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive their repository at construction time, so the storage backend
can be swapped without changing API handlers.
"""

from .customer_service import CustomerService  # noqa: F401
