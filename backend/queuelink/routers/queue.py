"""
Queue API endpoints.

Businesses create queues and manage them from the dashboard; customers
join through a shared link and poll their own position.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from queuelink.config import Settings, get_settings
from queuelink.dependencies import get_store
from queuelink.errors import QueueAlreadyExistsError, QueueError, QueueNotFoundError
from queuelink.models import new_queue_id
from queuelink.schemas.queue import (
    CreateQueueRequest,
    CustomerActionRequest,
    CustomerEnvelope,
    CustomerResponse,
    JoinQueueRequest,
    MessageResponse,
    QueueEnvelope,
    QueueListEnvelope,
    QueueResponse,
    UpdateQueueRequest,
)
from queuelink.services.demo_data import ensure_demo_data
from queuelink.services.queue_store import QueueStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _method_not_allowed():
    raise HTTPException(status_code=405, detail="Method not allowed")


def _seed_if_enabled(store: QueueStore, settings: Settings) -> None:
    if settings.seed_demo_data:
        ensure_demo_data(store)


def _require_customer_id(request: CustomerActionRequest) -> str:
    customer_id = (request.customer_id or "").strip()
    if not customer_id:
        raise HTTPException(status_code=400, detail="Customer ID is required")
    return customer_id


# =============================================================================
# Collection Endpoints
# =============================================================================

@router.post("/create", response_model=QueueEnvelope)
async def create_queue(
    request: CreateQueueRequest,
    store: QueueStore = Depends(get_store),
):
    """
    Create a new, empty queue.

    The queue id is generated here; the response contains everything the
    dashboard needs to build the shareable join link.
    """
    name = (request.name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Queue name is required")

    queue_id = new_queue_id()
    try:
        queue = store.create(queue_id, name)
    except QueueAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.debug(store.describe())

    return QueueEnvelope(
        queue=QueueResponse.from_model(queue),
        message=f'Queue "{name}" created successfully',
    )


@router.api_route(
    "/create",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def create_queue_wrong_method():
    _method_not_allowed()


@router.get("/all", response_model=QueueListEnvelope)
async def list_queues(
    store: QueueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    List every queue for the dashboard.

    Order follows creation order in the store; clients that need a stable
    order should sort by `createdAt`.
    """
    _seed_if_enabled(store, settings)

    queues = store.get_all_queues()
    logger.debug("Returning %d queues to dashboard", len(queues))

    return QueueListEnvelope(queues=[QueueResponse.from_model(q) for q in queues])


@router.api_route(
    "/all",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def list_queues_wrong_method():
    _method_not_allowed()


# =============================================================================
# Single Queue Endpoints
# =============================================================================

@router.get("/{queue_id}", response_model=QueueEnvelope, response_model_exclude_none=True)
async def get_queue(
    queue_id: str,
    store: QueueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Get a queue snapshot with all customers.

    Customers poll this endpoint and find themselves by the id they got
    when joining.
    """
    _seed_if_enabled(store, settings)

    queue = store.get_queue(queue_id)
    if queue is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error": "Queue not found",
                "queueId": queue_id,
                "availableQueues": store.queue_ids(),
            },
        )

    return QueueEnvelope(queue=QueueResponse.from_model(queue))


@router.patch("/{queue_id}", response_model=QueueEnvelope)
async def update_queue(
    queue_id: str,
    request: UpdateQueueRequest,
    store: QueueStore = Depends(get_store),
):
    """
    Open or close a queue.

    A closed queue rejects new joins but can still be served and cleaned up.
    """
    if request.is_active is None:
        raise HTTPException(status_code=400, detail="isActive is required")

    try:
        queue = store.set_active(queue_id, request.is_active)
    except QueueNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    state = "opened" if queue.is_active else "closed"
    return QueueEnvelope(
        queue=QueueResponse.from_model(queue),
        message=f'Queue "{queue.name}" {state}',
    )


@router.delete("/{queue_id}/delete", response_model=MessageResponse)
async def delete_queue(
    queue_id: str,
    store: QueueStore = Depends(get_store),
):
    """Delete a queue and all of its customers. Irreversible."""
    try:
        store.delete(queue_id)
    except QueueNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return MessageResponse(message="Queue deleted successfully")


# =============================================================================
# Customer Endpoints
# =============================================================================

@router.post("/{queue_id}/join", response_model=CustomerEnvelope)
async def join_queue(
    queue_id: str,
    request: JoinQueueRequest,
    store: QueueStore = Depends(get_store),
):
    """
    Join a queue.

    The returned customer id is the only handle the client gets; it has
    to keep it to find its position later.
    """
    name = (request.name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Name is required")

    try:
        customer = store.join(queue_id, name)
    except QueueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CustomerEnvelope(customer=CustomerResponse.from_model(customer))


@router.get("/{queue_id}/customers/{customer_id}", response_model=CustomerEnvelope)
async def get_customer(
    queue_id: str,
    customer_id: str,
    store: QueueStore = Depends(get_store),
):
    """Get one customer's current position and status."""
    try:
        customer = store.get_customer(queue_id, customer_id)
    except QueueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return CustomerEnvelope(customer=CustomerResponse.from_model(customer))


@router.delete("/{queue_id}/remove", response_model=MessageResponse)
async def remove_customer(
    queue_id: str,
    request: CustomerActionRequest,
    store: QueueStore = Depends(get_store),
):
    """Remove a customer (waiting or served) from the queue."""
    customer_id = _require_customer_id(request)

    try:
        store.remove(queue_id, customer_id)
    except QueueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MessageResponse(message="Customer removed from queue")


@router.post("/{queue_id}/serve", response_model=MessageResponse)
async def serve_customer(
    queue_id: str,
    request: CustomerActionRequest,
    store: QueueStore = Depends(get_store),
):
    """Mark a customer as served. Serving an already served customer is a no-op."""
    customer_id = _require_customer_id(request)

    try:
        store.serve(queue_id, customer_id)
    except QueueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MessageResponse(message="Customer marked as served")
