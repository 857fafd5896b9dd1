"""
Custom exceptions for the application.
"""


class InventoryError(Exception):
    """Base class for exceptions raised by the service layer."""
    pass


class CustomerNotFoundError(InventoryError):
    """Raised when an operation requires a customer that does not exist."""

    def __init__(self, customer_id: str) -> None:
        super().__init__(f"Customer {customer_id!r} not found")
        self.customer_id = customer_id
