"""
Reflex state management for the Order List UI.

This module contains the page state that handles order listing, search,
pagination and delete. Handlers run as background events: query changes
and ticket issuance happen under `async with self`, the remote call runs
outside the lock, and the response is applied only if no later fetch was
issued meanwhile. Ticket issuance, failure containment and the apply
decision come from order_ui.coordinator; this class only keeps the
sequence number per client.
"""

import reflex as rx

from order_ui.controller import NEW_ORDER_PATH, order_path
from order_ui.coordinator import (
    FetchTicket,
    fetch_page,
    issue_ticket,
    remove_order,
    settle,
)
from order_ui.models.order import OrderPage, format_page_label
from order_ui.models.query import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS, QueryState
from order_ui.models.reflex_models import OrderModel, order_to_model
from order_ui.services import get_order_service

APP_TITLE = "Sales Orders"
SEARCH_PLACEHOLDER = "Search by customer name/email, order ID, or date"


class OrderState(rx.State):
    """
    Page state for the orders list.

    search_term, page and page_size mirror the QueryState; result_page,
    total_pages, has_prev and has_next come from the last applied page.
    """

    orders: list[OrderModel] = []
    search_term: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    page_size_options: list[str] = [str(size) for size in PAGE_SIZE_OPTIONS]

    result_page: int = 1
    total_pages: int = 0
    has_prev: bool = False
    has_next: bool = False
    loading: bool = False

    # Backend-only issuance counter
    _sequence: int = 0

    @rx.var
    def page_label(self) -> str:
        """Pagination label, showing at least one page."""
        return format_page_label(self.result_page, self.total_pages)

    @rx.var
    def is_empty(self) -> bool:
        """Check if the empty row should be shown."""
        return not self.loading and len(self.orders) == 0

    @rx.event(background=True)
    async def on_load(self):
        """Initial fetch with the default query."""
        async with self:
            ticket = self._issue()
        await self._fetch(ticket)

    @rx.event(background=True)
    async def search(self, value: str):
        """Event handler for search input changes."""
        async with self:
            self._set_query(self._query().with_search_term(value))
            ticket = self._issue()
        await self._fetch(ticket)

    @rx.event(background=True)
    async def go_to_page(self, page: int):
        async with self:
            self._set_query(self._query().with_page(page))
            ticket = self._issue()
        await self._fetch(ticket)

    @rx.event(background=True)
    async def previous_page(self):
        async with self:
            self._set_query(self._query().with_page(self.page - 1))
            ticket = self._issue()
        await self._fetch(ticket)

    @rx.event(background=True)
    async def next_page(self):
        async with self:
            self._set_query(self._query().with_page(self.page + 1))
            ticket = self._issue()
        await self._fetch(ticket)

    @rx.event(background=True)
    async def change_page_size(self, value: str):
        """Event handler for the page size selector."""
        async with self:
            self._set_query(self._query().with_page_size(int(value)))
            ticket = self._issue()
        await self._fetch(ticket)

    @rx.event(background=True)
    async def delete_order(self, order_id: str):
        """Delete an order and refresh the current page on success."""
        if not await remove_order(get_order_service(), order_id):
            return
        async with self:
            ticket = self._issue()
        await self._fetch(ticket)

    @rx.event
    def view_order(self, order_id: str):
        return rx.redirect(order_path(order_id))

    @rx.event
    def create_order(self):
        return rx.redirect(NEW_ORDER_PATH)

    def _query(self) -> QueryState:
        return QueryState(self.search_term, self.page, self.page_size)

    def _set_query(self, query: QueryState) -> None:
        self.search_term = query.search_term
        self.page = query.page
        self.page_size = query.page_size

    def _issue(self) -> FetchTicket:
        """Create a ticket for the current query. Call under `async with self`."""
        ticket = issue_ticket(self._sequence, self._query())
        self._sequence = ticket.sequence
        self.loading = True
        return ticket

    async def _fetch(self, ticket: FetchTicket) -> None:
        """Run the ticket's request and apply it if still current."""
        page = await fetch_page(get_order_service(), ticket)
        async with self:
            if settle(ticket, self._sequence):
                if page is not None:
                    self._apply(page)
                self.loading = False

    def _apply(self, page: OrderPage) -> None:
        self.orders = [order_to_model(order) for order in page.items]
        self.result_page = page.page
        self.total_pages = page.total_pages
        self.has_prev = page.has_prev
        self.has_next = page.has_next
