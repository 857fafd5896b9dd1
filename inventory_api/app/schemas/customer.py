"""
Pydantic schemas for customer records.

``Customer`` is both the stored entity and the read model returned by
the API.  ``CustomerCreate`` is the payload for registering a new
customer and ``CustomerUpdate`` carries the descriptive fields that an
update is allowed to change.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """A customer record."""

    model_config = ConfigDict(validate_assignment=True)

    customer_id: Optional[str] = Field(
        None, description="Unique identifier; assigned by the repository when empty"
    )
    name: Optional[str] = None
    email: Optional[str] = None
    contact: Optional[str] = Field(None, description="Phone number or other contact detail")
    address: Optional[str] = None
    active: bool = Field(True, description="False once the customer has been soft-deleted")
    added: Optional[datetime] = Field(None, description="When the customer was first registered")


class CustomerCreate(BaseModel):
    """Schema for registering a new customer.

    ``customer_id`` may be supplied by the caller; otherwise one is
    generated on save.
    """

    customer_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    contact: Optional[str] = None
    address: Optional[str] = None
    active: bool = True

    def to_customer(self) -> Customer:
        return Customer(**self.model_dump())


class CustomerUpdate(BaseModel):
    """Schema for updating an existing customer.

    Only ``name``, ``email``, ``contact`` and ``address`` are applied;
    ``active`` and ``added`` are never touched by an update.
    """

    customer_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    contact: Optional[str] = None
    address: Optional[str] = None

    def to_customer(self) -> Customer:
        return Customer(**self.model_dump())
