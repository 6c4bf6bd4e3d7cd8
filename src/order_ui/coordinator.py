"""
Fetch coordination for the order list.

The coordinator turns a QueryState snapshot into a list or search request,
issues it, and decides whether its response may replace the current
OrderPage. Every issued request gets a ticket carrying a monotonically
increasing sequence number; a response is applied only if its ticket is
still the latest one issued. Requests therefore win by issuance order,
not by completion order.

Failures are contained here: a rejected fetch or delete is logged and
leaves the previous OrderPage in place.

The module-level helpers (issue_ticket, fetch_page, settle, remove_order)
hold the whole decision logic. FetchCoordinator keeps its sequence in an
attribute; the Reflex page keeps it in a backend state var and calls the
same helpers.
"""

import asyncio
from dataclasses import dataclass

from order_ui.lib import logs
from order_ui.models.order import OrderPage
from order_ui.models.query import SEARCH, FetchRequest, QueryState
from order_ui.services.order_service import OrderService

LOG = logs.logger(__file__)


@dataclass(frozen=True, slots=True)
class FetchTicket:
    """
    Identifies one issued fetch.

    Attributes:
        sequence: Issuance number, strictly increasing per owner.
        request: The parameters the fetch was issued with.
    """

    sequence: int
    request: FetchRequest


async def execute(service: OrderService, request: FetchRequest) -> OrderPage:
    """
    Run a fetch request against the service.

    The choice between search and list is a pure function of the request
    kind; there is no mixed mode.
    """
    if request.kind == SEARCH:
        return await service.search_orders(
            request.query or "", request.page, request.page_size
        )
    return await service.list_orders(request.page, request.page_size)


def issue_ticket(last_sequence: int, query: QueryState) -> FetchTicket:
    """Create the ticket following last_sequence for the query."""
    ticket = FetchTicket(last_sequence + 1, query.to_request())
    LOG.info("Fetch issued - #%d %s", ticket.sequence, ticket.request)
    return ticket


async def fetch_page(service: OrderService, ticket: FetchTicket) -> OrderPage | None:
    """
    Run the ticket's request, returning None instead of raising on failure.
    """
    try:
        return await execute(service, ticket.request)
    except Exception as e:
        LOG.error(
            "Failed to fetch orders - #%d: %s", ticket.sequence, e, exc_info=True
        )
        return None


def settle(ticket: FetchTicket, latest_sequence: int) -> bool:
    """
    Decide whether a completed ticket still owns the view.

    Returns True when no later ticket was issued: the caller then applies
    the page (if any) and leaves loading state. A superseded ticket leaves
    both to the fetch that replaced it.
    """
    if ticket.sequence == latest_sequence:
        return True
    LOG.debug(
        "Discarding stale response - #%d (latest #%d)",
        ticket.sequence,
        latest_sequence,
    )
    return False


async def remove_order(service: OrderService, order_id: str) -> bool:
    """Delete an order, returning False instead of raising on failure."""
    try:
        await service.delete_order(order_id)
    except Exception as e:
        LOG.error("Failed to delete order %s: %s", order_id, e, exc_info=True)
        return False
    return True


class FetchCoordinator:
    """
    Issues fetches and applies the latest one's result.

    Attributes:
        result: Last OrderPage applied, or None before the first success.
        loading: True while the latest issued fetch is outstanding.
    """

    def __init__(self, service: OrderService) -> None:
        self._service = service
        self._sequence = 0
        self._in_flight: FetchTicket | None = None
        self.result: OrderPage | None = None
        self.loading = False

    @property
    def in_flight(self) -> FetchTicket | None:
        """The latest issued ticket if it has not settled yet."""
        return self._in_flight

    def issue(self, query: QueryState) -> FetchTicket:
        """Create a ticket for the query and enter loading state."""
        ticket = issue_ticket(self._sequence, query)
        self._sequence = ticket.sequence
        self._in_flight = ticket
        self.loading = True
        return ticket

    def load(self, query: QueryState) -> "asyncio.Task[OrderPage | None]":
        """
        Issue a fetch for the query and schedule it on the running loop.

        The ticket is issued immediately, so issuance order matches call
        order, and the request goes out whether or not the caller awaits
        the returned task. The task resolves to the applied OrderPage, or
        None when the fetch failed or was superseded. It never raises for
        service failures.
        """
        return asyncio.ensure_future(self._run(self.issue(query)))

    async def _run(self, ticket: FetchTicket) -> OrderPage | None:
        page: OrderPage | None = None
        try:
            page = await fetch_page(self._service, ticket)
        finally:
            current = settle(ticket, self._sequence)
            if current:
                self._in_flight = None
                self.loading = False
                if page is not None:
                    self.result = page
        return page if current else None
