"""
Domain errors raised by the queue store.

Routers translate these into HTTP responses; the store itself knows
nothing about status codes.
"""


class QueueError(Exception):
    """Base class for expected queue store failures."""

    message = "Queue operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class NotFoundError(QueueError):
    message = "Not found"


class QueueNotFoundError(NotFoundError):
    message = "Queue not found"

    def __init__(self, queue_id: str):
        self.queue_id = queue_id
        super().__init__()


class CustomerNotFoundError(NotFoundError):
    message = "Customer not found"

    def __init__(self, queue_id: str, customer_id: str):
        self.queue_id = queue_id
        self.customer_id = customer_id
        super().__init__()


class QueueInactiveError(QueueError):
    message = "Queue is not active"

    def __init__(self, queue_id: str):
        self.queue_id = queue_id
        super().__init__()


class DuplicateCustomerError(QueueError):
    message = "Customer already in queue"

    def __init__(self, queue_id: str, name: str):
        self.queue_id = queue_id
        self.name = name
        super().__init__()


class QueueAlreadyExistsError(QueueError):
    message = "Queue already exists"

    def __init__(self, queue_id: str):
        self.queue_id = queue_id
        super().__init__()
