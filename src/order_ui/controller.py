"""
List controller for the orders page.

OrderListController owns the QueryState and a FetchCoordinator. Every
user action first applies a pure QueryState transition, then issues a
fetch for the new snapshot. The setters return the pending
fetch as an already scheduled task, so several actions can be in flight
at once while their tickets are issued in call order.
"""

import asyncio
from typing import Any, Callable

from order_ui.coordinator import FetchCoordinator, remove_order
from order_ui.lib import logs
from order_ui.models.order import OrderPage
from order_ui.models.query import QueryState
from order_ui.services.order_service import OrderService

LOG = logs.logger(__file__)

NEW_ORDER_PATH = "/orders/new"


def order_path(order_id: str) -> str:
    """Router target for the order detail page."""
    return f"/orders/{order_id}"


def _ignore_navigation(path: str) -> None:
    LOG.debug("No router configured, dropping navigation to %s", path)


class OrderListController:
    """
    Coordinates search, pagination and delete for one orders view.

    Attributes:
        query: Current QueryState.
    """

    def __init__(
        self,
        service: OrderService,
        navigate: Callable[[str], Any] | None = None,
        query: QueryState | None = None,
    ) -> None:
        """
        Args:
            service: Remote order store.
            navigate: Router callable receiving a path; its return value is
                passed back from view_order/create_order.
            query: Initial QueryState, defaults to ("", 1, 20).
        """
        self._service = service
        self._navigate = navigate or _ignore_navigation
        self._coordinator = FetchCoordinator(service)
        self.query = query or QueryState()

    @property
    def search_term(self) -> str:
        return self.query.search_term

    @property
    def page(self) -> int:
        return self.query.page

    @property
    def page_size(self) -> int:
        return self.query.page_size

    @property
    def loading(self) -> bool:
        return self._coordinator.loading

    @property
    def result(self) -> OrderPage | None:
        return self._coordinator.result

    def mount(self) -> "asyncio.Task[OrderPage | None]":
        """Initial load with the current query."""
        return self._coordinator.load(self.query)

    def set_search_term(self, value: str) -> "asyncio.Task[OrderPage | None]":
        self.query = self.query.with_search_term(value)
        return self._coordinator.load(self.query)

    def set_page(self, page: int) -> "asyncio.Task[OrderPage | None]":
        self.query = self.query.with_page(page)
        return self._coordinator.load(self.query)

    def set_page_size(self, page_size: int) -> "asyncio.Task[OrderPage | None]":
        self.query = self.query.with_page_size(page_size)
        return self._coordinator.load(self.query)

    def next_page(self) -> "asyncio.Task[OrderPage | None]":
        return self.set_page(self.query.page + 1)

    def previous_page(self) -> "asyncio.Task[OrderPage | None]":
        return self.set_page(self.query.page - 1)

    async def delete_order(self, order_id: str) -> bool:
        """
        Delete an order, then refresh the current page.

        The refresh reuses the QueryState current at the time the delete
        completes; the page is not reset. When the delete fails nothing is
        refreshed and the displayed orders stay as they were.

        Returns:
            True if the delete succeeded.
        """
        if not await remove_order(self._service, order_id):
            return False
        await self._coordinator.load(self.query)
        return True

    def view_order(self, order_id: str) -> Any:
        return self._navigate(order_path(order_id))

    def create_order(self) -> Any:
        return self._navigate(NEW_ORDER_PATH)
