"""Queue models - a named queue and the customers waiting in it."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from queuelink.utils.timezone import utc_now


class CustomerStatus(str, Enum):
    """Lifecycle states of a customer. Transition is one-way."""
    WAITING = "waiting"
    SERVED = "served"


def new_customer_id() -> str:
    """Generate a globally unique customer id."""
    return f"customer-{uuid.uuid4().hex}"


def new_queue_id() -> str:
    """Generate a fresh queue id for the create endpoint."""
    return uuid.uuid4().hex


@dataclass
class Customer:
    """
    A participant in a queue.

    `position` is owned by the store and recalculated after every change;
    for served customers it is the last position they held while waiting.
    """

    name: str
    position: int
    id: str = field(default_factory=new_customer_id)
    joined_at: datetime = field(default_factory=utc_now)
    status: CustomerStatus = CustomerStatus.WAITING

    @property
    def is_waiting(self) -> bool:
        return self.status == CustomerStatus.WAITING

    def __repr__(self) -> str:
        return f"<Customer {self.name} #{self.position} ({self.status.value})>"


@dataclass
class Queue:
    """
    A named queue.

    Customers are kept waiting-first in join order, followed by served
    customers in the order they were served.
    """

    id: str
    name: str
    customers: list[Customer] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    is_active: bool = True

    @property
    def waiting(self) -> list[Customer]:
        return [c for c in self.customers if c.is_waiting]

    @property
    def served(self) -> list[Customer]:
        return [c for c in self.customers if not c.is_waiting]

    def find_customer(self, customer_id: str) -> Customer | None:
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None

    def __repr__(self) -> str:
        return f"<Queue {self.name} ({len(self.customers)} customers)>"
