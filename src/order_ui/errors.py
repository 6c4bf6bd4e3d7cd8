"""
Error types raised by order service implementations.

Both kinds are recovered by the list controller: they are logged and
never surfaced to the view.
"""


class OrderServiceError(Exception):
    """Base class for failures reported by an order service."""


class FetchFailed(OrderServiceError):
    """A list or search request was rejected or could not be decoded."""


class DeleteFailed(OrderServiceError):
    """A delete request was rejected."""

    def __init__(self, order_id: str, reason: str = "") -> None:
        self.order_id = order_id
        message = f"Failed to delete order {order_id}"
        super().__init__(f"{message}: {reason}" if reason else message)
