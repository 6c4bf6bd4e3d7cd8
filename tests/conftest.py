"""Shared fixtures for the order list tests."""

import asyncio
from decimal import Decimal

import pytest

from order_ui.errors import DeleteFailed, FetchFailed
from order_ui.models.order import Order, OrderPage
from order_ui.services.order_service_demo import DemoOrderService


def make_order(index: int) -> Order:
    customer = "alice@example.com" if index % 2 == 0 else "bob@example.com"
    return Order(
        order_id=str(index),
        customer_id=customer,
        created_at=f"2024-03-{index % 28 + 1:02d}",
        total_price=Decimal(index) + Decimal("0.50"),
    )


def order_ids(page: OrderPage) -> set[str]:
    return {order.order_id for order in page.items}


async def settle() -> None:
    """Give started tasks a few loop turns to reach their await points."""
    for _ in range(10):
        await asyncio.sleep(0)


class RecordingOrderService(DemoOrderService):
    """
    Demo service that records every call and can hold responses.

    With `blocking` set, each call waits on its own gate until the test
    calls release(index), so completion order is under test control.
    """

    def __init__(self, orders=None) -> None:
        if orders is None:
            orders = [make_order(i) for i in range(1, 96)]
        super().__init__(orders)
        self.calls: list[tuple] = []
        self.blocking = False
        self.fail_fetch = False
        self.fail_delete = False
        self._gates: dict[int, asyncio.Event] = {}

    def release(self, index: int) -> None:
        self._gates[index].set()

    async def list_orders(self, page: int = 1, page_size: int = 20) -> OrderPage:
        await self._record(("list", page, page_size))
        if self.fail_fetch:
            raise FetchFailed("list rejected")
        return await super().list_orders(page, page_size)

    async def search_orders(
        self, query: str, page: int = 1, page_size: int = 20
    ) -> OrderPage:
        await self._record(("search", query, page, page_size))
        if self.fail_fetch:
            raise FetchFailed("search rejected")
        return await super().search_orders(query, page, page_size)

    async def delete_order(self, order_id: str) -> None:
        await self._record(("delete", order_id))
        if self.fail_delete:
            raise DeleteFailed(order_id, "rejected")
        await super().delete_order(order_id)

    def fetch_calls(self) -> list[tuple]:
        return [call for call in self.calls if call[0] != "delete"]

    async def _record(self, call: tuple) -> None:
        index = len(self.calls)
        self.calls.append(call)
        if self.blocking:
            gate = self._gates[index] = asyncio.Event()
            await gate.wait()


@pytest.fixture
def service() -> RecordingOrderService:
    return RecordingOrderService()
