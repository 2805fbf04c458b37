"""Demo data tests."""

from queuelink.services.demo_data import DEMO_QUEUES, ensure_demo_data
from queuelink.services.queue_store import QueueStore


def test_creates_both_demo_queues(store: QueueStore):
    created = ensure_demo_data(store)

    assert created == ["demo-queue-123", "demo-queue-456"]
    service = store.get_queue("demo-queue-123")
    assert service.name == "Customer Service"
    assert [(c.name, c.position) for c in service.customers] == [
        ("Alice Johnson", 1),
        ("Bob Smith", 2),
        ("Carol Davis", 3),
    ]
    assert len(store.get_queue("demo-queue-456").customers) == 2


def test_repeated_calls_do_not_duplicate(store: QueueStore):
    for _ in range(5):
        ensure_demo_data(store)

    assert len(store) == 2
    counts = {q.id: len(q.customers) for q in store.get_all_queues()}
    assert counts == {d["id"]: len(d["customers"]) for d in DEMO_QUEUES}
    assert ensure_demo_data(store) == []


def test_recreates_only_missing_queue(store: QueueStore):
    ensure_demo_data(store)
    bob = next(c for c in store.get_queue("demo-queue-123").customers if c.name == "Bob Smith")
    store.serve("demo-queue-123", bob.id)
    store.delete("demo-queue-456")

    assert ensure_demo_data(store) == ["demo-queue-456"]
    # The untouched demo queue keeps its state
    assert store.get_customer("demo-queue-123", bob.id).status.value == "served"


def test_leaves_user_queues_alone(store: QueueStore):
    store.create("mine", "My Queue")
    ensure_demo_data(store)
    assert store.queue_ids() == ["mine", "demo-queue-123", "demo-queue-456"]


def test_seed_script_output(capsys):
    from scripts.seed_demo import main

    main()

    out = capsys.readouterr().out
    assert "+ Created: Customer Service (demo-queue-123)" in out
    assert "  3. Carol Davis [waiting]" in out
    assert "✓ Re-run created 0 queue(s)" in out
    assert "Total queues: 2" in out
