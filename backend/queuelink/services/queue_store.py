"""
Queue store - the single source of truth for queue and customer state.

State lives in process memory only. Each application owns one store
instance (created in the FastAPI lifespan and attached to `app.state`);
handlers reach it through the `get_store` dependency.

All endpoints are `async def` and call the store without awaiting, so an
operation always runs to completion before the next request is handled.
No locking is needed as long as the app runs as a single process.
"""

import copy
import logging

from queuelink.errors import (
    CustomerNotFoundError,
    DuplicateCustomerError,
    QueueAlreadyExistsError,
    QueueInactiveError,
    QueueNotFoundError,
)
from queuelink.models import Customer, CustomerStatus, Queue
from queuelink.utils.timezone import format_local_time

logger = logging.getLogger(__name__)


def recalculate_positions(customers: list[Customer]) -> list[Customer]:
    """
    Reorder customers waiting-first and renumber the waiting ones 1..N.

    Relative order inside each partition is preserved. Served customers
    keep whatever position they last had.
    """
    waiting = [c for c in customers if c.status == CustomerStatus.WAITING]
    served = [c for c in customers if c.status == CustomerStatus.SERVED]

    for index, customer in enumerate(waiting, start=1):
        customer.position = index

    return waiting + served


class QueueStore:
    """In-memory registry of queues keyed by queue id."""

    def __init__(self) -> None:
        self._queues: dict[str, Queue] = {}

    def __len__(self) -> int:
        return len(self._queues)

    def __contains__(self, queue_id: object) -> bool:
        return queue_id in self._queues

    def exists(self, queue_id: str) -> bool:
        return queue_id in self

    def queue_ids(self) -> list[str]:
        return list(self._queues)

    # -------------------- internal helpers --------------------

    def _require_queue(self, queue_id: str) -> Queue:
        queue = self._queues.get(queue_id)
        if queue is None:
            logger.info("Queue not found: %s (available: %s)", queue_id, ", ".join(self._queues))
            raise QueueNotFoundError(queue_id)
        return queue

    def _require_customer(self, queue: Queue, customer_id: str) -> Customer:
        customer = queue.find_customer(customer_id)
        if customer is None:
            logger.info("Customer %s not found in queue %s", customer_id, queue.id)
            raise CustomerNotFoundError(queue.id, customer_id)
        return customer

    # -------------------- queue lifecycle --------------------

    def create(self, queue_id: str, name: str) -> Queue:
        """
        Create an empty, active queue.

        Raises QueueAlreadyExistsError if the id is already taken.
        """
        if queue_id in self._queues:
            raise QueueAlreadyExistsError(queue_id)

        queue = Queue(id=queue_id, name=name)
        self._queues[queue_id] = queue
        logger.info("Queue created: %s - %s (total queues: %d)", queue_id, name, len(self._queues))
        return copy.deepcopy(queue)

    def delete(self, queue_id: str) -> None:
        """Remove a queue and all its customers."""
        queue = self._require_queue(queue_id)
        del self._queues[queue_id]
        logger.info(
            "Queue deleted: %s - %s (%d customers dropped)",
            queue_id, queue.name, len(queue.customers),
        )

    def set_active(self, queue_id: str, is_active: bool) -> Queue:
        """Open or close a queue for new joins."""
        queue = self._require_queue(queue_id)
        queue.is_active = is_active
        logger.info("Queue %s is now %s", queue_id, "open" if is_active else "closed")
        return copy.deepcopy(queue)

    # -------------------- customer operations --------------------

    def join(self, queue_id: str, name: str) -> Customer:
        """
        Add a customer to the end of the waiting line.

        Names are compared case-insensitively against waiting customers
        only, so a served customer can rejoin under the same name.
        """
        queue = self._require_queue(queue_id)

        if not queue.is_active:
            logger.info("Rejected join to closed queue %s: %s", queue_id, name)
            raise QueueInactiveError(queue_id)

        lowered = name.lower()
        if any(c.is_waiting and c.name.lower() == lowered for c in queue.customers):
            logger.info("Rejected duplicate name in queue %s: %s", queue_id, name)
            raise DuplicateCustomerError(queue_id, name)

        customer = Customer(name=name, position=len(queue.waiting) + 1)
        queue.customers.append(customer)
        queue.customers = recalculate_positions(queue.customers)

        logger.info("Customer added to queue %s: %s (position %d)", queue_id, name, customer.position)
        return copy.deepcopy(customer)

    def remove(self, queue_id: str, customer_id: str) -> None:
        """Drop a customer, waiting or served, and close the gap."""
        queue = self._require_queue(queue_id)
        customer = self._require_customer(queue, customer_id)

        queue.customers = recalculate_positions(
            [c for c in queue.customers if c.id != customer.id]
        )
        logger.info("Customer removed from queue %s: %s", queue_id, customer.name)

    def serve(self, queue_id: str, customer_id: str) -> None:
        """Mark a customer as served. Serving twice is a no-op."""
        queue = self._require_queue(queue_id)
        customer = self._require_customer(queue, customer_id)

        customer.status = CustomerStatus.SERVED
        queue.customers = recalculate_positions(queue.customers)
        logger.info("Customer served in queue %s: %s", queue_id, customer.name)

    # -------------------- reads --------------------

    def get_queue(self, queue_id: str) -> Queue | None:
        """Return a detached snapshot of a queue, or None."""
        queue = self._queues.get(queue_id)
        if queue is None:
            return None
        return copy.deepcopy(queue)

    def get_customer(self, queue_id: str, customer_id: str) -> Customer:
        """Look up one customer, e.g. for a client polling its own position."""
        queue = self._require_queue(queue_id)
        return copy.deepcopy(self._require_customer(queue, customer_id))

    def get_all_queues(self) -> list[Queue]:
        """Snapshots of every queue, in insertion order."""
        logger.debug("Getting all queues. Store size: %d", len(self._queues))
        return [copy.deepcopy(q) for q in self._queues.values()]

    def describe(self) -> str:
        """Human-readable summary of the store, one line per queue."""
        lines = [f"Total queues: {len(self._queues)}"]
        for queue_id, queue in self._queues.items():
            lines.append(
                f"Queue {queue_id}: {queue.name} "
                f"({len(queue.waiting)} waiting, {len(queue.served)} served, "
                f"{'open' if queue.is_active else 'closed'}, "
                f"created {format_local_time(queue.created_at)})"
            )
        return "\n".join(lines)
