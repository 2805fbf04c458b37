# Domain models
from queuelink.models.queue import (
    Customer,
    CustomerStatus,
    Queue,
    new_customer_id,
    new_queue_id,
)

__all__ = [
    "Customer",
    "CustomerStatus",
    "Queue",
    "new_customer_id",
    "new_queue_id",
]
