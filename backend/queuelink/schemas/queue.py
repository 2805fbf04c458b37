"""
Pydantic schemas for the queue endpoints.

Fields are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from queuelink.models import Customer, CustomerStatus, Queue
from queuelink.utils.timezone import to_iso


class CamelModel(BaseModel):
    """Base schema that speaks camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Request schemas
#
# Required fields are optional here so that a missing value surfaces as
# our own 400 response instead of a generic validation error.

class CreateQueueRequest(CamelModel):
    """Body for creating a queue."""
    name: Optional[str] = None


class JoinQueueRequest(CamelModel):
    """Body for joining a queue."""
    name: Optional[str] = None


class CustomerActionRequest(CamelModel):
    """Body for serve/remove - identifies the customer."""
    customer_id: Optional[str] = None


class UpdateQueueRequest(CamelModel):
    """Body for opening or closing a queue."""
    is_active: Optional[bool] = None


# Response schemas

class CustomerResponse(CamelModel):
    """A customer as shown to staff and to the customer themselves."""
    id: str
    name: str
    position: int
    joined_at: datetime
    status: CustomerStatus

    @field_serializer("joined_at")
    def _serialize_joined_at(self, value: datetime) -> str:
        return to_iso(value)

    @classmethod
    def from_model(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name,
            position=customer.position,
            joined_at=customer.joined_at,
            status=customer.status,
        )


class QueueResponse(CamelModel):
    """Full queue snapshot including its customers."""
    id: str
    name: str
    customers: list[CustomerResponse]
    created_at: datetime
    is_active: bool

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return to_iso(value)

    @classmethod
    def from_model(cls, queue: Queue) -> "QueueResponse":
        return cls(
            id=queue.id,
            name=queue.name,
            customers=[CustomerResponse.from_model(c) for c in queue.customers],
            created_at=queue.created_at,
            is_active=queue.is_active,
        )


class QueueEnvelope(CamelModel):
    """Response for single-queue reads and creation."""
    success: bool = True
    queue: QueueResponse
    message: Optional[str] = None


class QueueListEnvelope(CamelModel):
    """Response for the dashboard listing."""
    success: bool = True
    queues: list[QueueResponse]


class CustomerEnvelope(CamelModel):
    """Response for join and customer lookup."""
    success: bool = True
    customer: CustomerResponse


class MessageResponse(CamelModel):
    """Schema for simple message responses."""
    success: bool = True
    message: str
