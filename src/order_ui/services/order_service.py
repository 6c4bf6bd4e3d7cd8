"""
Abstract base class defining the order data access contract.

All order service implementations must extend OrderService and provide
list, search and delete. Implementations report failures by raising
FetchFailed or DeleteFailed from order_ui.errors.

Implementations:
- DemoOrderService: Static in-memory data for development/testing
- HttpOrderService: REST client for the order API
"""

from abc import ABC, abstractmethod

from order_ui.models.order import OrderPage


class OrderService(ABC):
    """
    Abstract base class for order data access.

    The store is authoritative on pagination: the returned OrderPage
    carries page, total_pages, has_prev and has_next as computed remotely.
    """

    @abstractmethod
    async def list_orders(self, page: int = 1, page_size: int = 20) -> OrderPage:
        """
        Return one page of all orders.

        Args:
            page: Page number (1-indexed).
            page_size: Number of items per page.

        Raises:
            FetchFailed: If the store rejects the request.
        """

    @abstractmethod
    async def search_orders(
        self, query: str, page: int = 1, page_size: int = 20
    ) -> OrderPage:
        """
        Return one page of orders matching the query.

        Args:
            query: Search text (customer, order ID or date).
            page: Page number (1-indexed).
            page_size: Number of items per page.

        Raises:
            FetchFailed: If the store rejects the request.
        """

    @abstractmethod
    async def delete_order(self, order_id: str) -> None:
        """
        Delete a single order.

        Raises:
            DeleteFailed: If the store rejects the request.
        """

    async def aclose(self) -> None:
        """Release any held resources. Default implementation does nothing."""
        pass
