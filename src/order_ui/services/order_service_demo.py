"""
Demo implementation of OrderService using in-memory data.

This service is useful for:
- Local development without a running order API
- Testing the list controller with realistic data
- Demonstrating the application without backend dependencies

Orders are copied on construction, so deletes only affect this instance.
"""

import asyncio
from typing import Sequence

from order_ui.data.demo_orders import DEMO_ORDERS
from order_ui.errors import DeleteFailed
from order_ui.lib import logs
from order_ui.models.order import Order, OrderPage
from order_ui.services.order_service import OrderService
from order_ui.utils import matches_query, page_slice

LOG = logs.logger(__file__)


class DemoOrderService(OrderService):
    """
    In-memory order service backed by static demo data.

    Attributes:
        latency: Seconds to sleep before answering, to make the loading
            state visible in the demo page.
    """

    def __init__(
        self, orders: Sequence[Order] | None = None, latency: float = 0.0
    ) -> None:
        """
        Initialize with order data.

        Args:
            orders: Custom order list, or None to use DEMO_ORDERS.
            latency: Artificial response delay in seconds.
        """
        self._orders: list[Order] = list(DEMO_ORDERS if orders is None else orders)
        self.latency = latency

    async def list_orders(self, page: int = 1, page_size: int = 20) -> OrderPage:
        await self._wait()
        return page_slice(self._orders, page, page_size)

    async def search_orders(
        self, query: str, page: int = 1, page_size: int = 20
    ) -> OrderPage:
        """Return orders whose id, customer or date contains the query."""
        await self._wait()
        filtered = [order for order in self._orders if matches_query(order, query)]
        return page_slice(filtered, page, page_size)

    async def delete_order(self, order_id: str) -> None:
        await self._wait()
        remaining = [order for order in self._orders if order.order_id != order_id]
        if len(remaining) == len(self._orders):
            raise DeleteFailed(order_id, "not found")
        self._orders = remaining
        LOG.info("Deleted demo order %s (%d left)", order_id, len(remaining))

    async def _wait(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
