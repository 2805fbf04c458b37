"""
Demo data - two fixed example queues for the dashboard.

Seeding is idempotent: a demo queue is only created when its id is
missing, so it is safe to call on every read endpoint.
"""

import logging

from queuelink.services.queue_store import QueueStore

logger = logging.getLogger(__name__)


DEMO_QUEUES = [
    {
        "id": "demo-queue-123",
        "name": "Customer Service",
        "customers": ["Alice Johnson", "Bob Smith", "Carol Davis"],
    },
    {
        "id": "demo-queue-456",
        "name": "Appointments",
        "customers": ["David Wilson", "Emma Brown"],
    },
]


def ensure_demo_data(store: QueueStore) -> list[str]:
    """
    Create any missing demo queue and fill it with its customers.

    Customers go through the normal join path so positions are computed
    exactly as for real joins.

    Returns:
        Ids of the queues created by this call (empty if all existed)
    """
    created = []

    for queue_data in DEMO_QUEUES:
        queue_id = queue_data["id"]
        if queue_id in store:
            continue

        store.create(queue_id, queue_data["name"])
        for name in queue_data["customers"]:
            store.join(queue_id, name)

        created.append(queue_id)
        logger.info("Created demo queue %s (%d customers)", queue_id, len(queue_data["customers"]))

    if created:
        logger.debug("Demo data initialized.\n%s", store.describe())

    return created
