"""
Build the demo dataset against a fresh store and print it.

Useful to check what the dashboard will show on a clean start.

Run with: python -m scripts.seed_demo
"""

from queuelink.services.demo_data import ensure_demo_data
from queuelink.services.queue_store import QueueStore


def main():
    """Main entry point."""
    print("=" * 50)
    print("QueueLink demo data")
    print("=" * 50)

    store = QueueStore()
    created = ensure_demo_data(store)

    for queue_id in created:
        queue = store.get_queue(queue_id)
        print(f"\n+ Created: {queue.name} ({queue.id})")
        for customer in queue.customers:
            print(f"  {customer.position}. {customer.name} [{customer.status.value}]")

    # A second pass must not add anything
    again = ensure_demo_data(store)
    print(f"\n✓ Re-run created {len(again)} queue(s)")
    print()
    print(store.describe())


if __name__ == "__main__":
    main()
