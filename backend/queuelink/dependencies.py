"""
Shared FastAPI dependencies.
"""

from fastapi import Request

from queuelink.services.queue_store import QueueStore


def get_store(request: Request) -> QueueStore:
    """
    Get the queue store owned by the running application.

    The store is created in the app lifespan; tests override this
    dependency with a fresh store.
    """
    return request.app.state.store
