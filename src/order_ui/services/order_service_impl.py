"""
REST implementation of OrderService backed by the order API.

This module provides the production order service that:
- Lists and searches orders through paginated GET endpoints
- Deletes orders through DELETE /orders/{id}
- Translates HTTP and decoding failures into FetchFailed / DeleteFailed

Endpoints (relative to ORDER_UI_API_URL):
- GET    /orders?page=&pageSize=
- GET    /orders/search?query=&page=&pageSize=
- DELETE /orders/{orderId}

List and search responses carry the orders under `orders` (or `items`)
and the pagination block under `pagination` (or at the top level), using
camelCase keys. Pagination flags are taken as reported.
"""

import os
from decimal import InvalidOperation
from typing import Any, Mapping

import httpx
from benedict import benedict

from order_ui.errors import DeleteFailed, FetchFailed
from order_ui.lib import logs
from order_ui.models.order import Order, OrderPage
from order_ui.services.order_service import OrderService
from order_ui.utils import parse_decimal

LOG = logs.logger(__file__)

_DEFAULT_API_URL = "http://localhost:8080/api"
_DEFAULT_TIMEOUT = 30.0


def _parse_order(b: benedict) -> Order:
    """
    Parse a benedict dictionary into an Order dataclass.

    Raises:
        KeyError: If orderId is missing.
        decimal.InvalidOperation: If totalPrice is not numeric.
    """
    return Order(
        order_id=str(b["orderId"]),
        customer_id=str(b.get("customerId") or ""),
        created_at=str(b.get("createdAt") or ""),
        total_price=parse_decimal(b.get("totalPrice")),
    )


def _parse_page(payload: Mapping[str, Any], page: int) -> OrderPage:
    """
    Parse a list/search response body into an OrderPage.

    Args:
        payload: Decoded JSON body.
        page: Requested page, used when the body omits it.
    """
    b = benedict(payload, keyattr_dynamic=True)
    meta = b.get("pagination") or b
    raw_items = b.get("orders")
    if raw_items is None:
        raw_items = b.get("items", [])
    return OrderPage(
        items=tuple(_parse_order(benedict(item)) for item in raw_items),
        page=int(meta.get("page", page)),
        total_pages=int(meta.get("totalPages", 0)),
        has_prev=bool(meta.get("hasPrev", False)),
        has_next=bool(meta.get("hasNext", False)),
    )


class HttpOrderService(OrderService):
    """
    Order service talking to the REST order API over httpx.

    Optional Environment Variables:
        ORDER_UI_API_URL: Base URL of the API (default http://localhost:8080/api)
        ORDER_UI_API_TIMEOUT: Request timeout in seconds (default 30)
        ORDER_UI_API_TOKEN: Bearer token sent as Authorization header

    Attributes:
        base_url: API base URL without trailing slash.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the service from arguments or environment.

        Args:
            base_url: Overrides ORDER_UI_API_URL.
            timeout: Overrides ORDER_UI_API_TIMEOUT.
            token: Overrides ORDER_UI_API_TOKEN.
            transport: Custom httpx transport (used by tests).
        """
        self.base_url = (
            base_url or os.getenv("ORDER_UI_API_URL", _DEFAULT_API_URL)
        ).rstrip("/")
        self.timeout = (
            timeout
            if timeout is not None
            else float(os.getenv("ORDER_UI_API_TIMEOUT", _DEFAULT_TIMEOUT))
        )
        self._token = token or os.getenv("ORDER_UI_API_TOKEN") or None
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def list_orders(self, page: int = 1, page_size: int = 20) -> OrderPage:
        return await self._fetch_page(
            "/orders", {"page": page, "pageSize": page_size}, page
        )

    async def search_orders(
        self, query: str, page: int = 1, page_size: int = 20
    ) -> OrderPage:
        return await self._fetch_page(
            "/orders/search",
            {"query": query, "page": page, "pageSize": page_size},
            page,
        )

    async def delete_order(self, order_id: str) -> None:
        LOG.info("Deleting order %s", order_id)
        try:
            response = await self._http().delete(f"/orders/{order_id}")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DeleteFailed(
                order_id, f"HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DeleteFailed(order_id, str(exc)) from exc

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _fetch_page(
        self, path: str, params: dict[str, Any], page: int
    ) -> OrderPage:
        """GET a paginated endpoint and decode the body."""
        try:
            response = await self._http().get(path, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise FetchFailed(
                f"GET {path} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchFailed(f"GET {path} failed: {exc}") from exc
        except ValueError as exc:
            raise FetchFailed(f"GET {path} returned invalid JSON") from exc

        try:
            return _parse_page(payload, page)
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise FetchFailed(f"GET {path} returned an unexpected body") from exc

    def _http(self) -> httpx.AsyncClient:
        """Return the shared client, creating it on first use."""
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self._token:
                headers["Authorization"] = f"Bearer {self._token}"
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client
