"""
Data models for the Order List UI.

This package provides:
- Order domain models (Order, OrderPage)
- Query state and the fetch request it produces (QueryState, FetchRequest)

Table row models live in order_ui.models.reflex_models and are imported
directly by the Reflex page.
"""

from order_ui.models.order import (
    Order,
    OrderPage,
    format_page_label,
    serialize_order,
)
from order_ui.models.query import (
    DEFAULT_PAGE_SIZE,
    LIST,
    PAGE_SIZE_OPTIONS,
    SEARCH,
    FetchRequest,
    QueryState,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "LIST",
    "PAGE_SIZE_OPTIONS",
    "SEARCH",
    "FetchRequest",
    "Order",
    "OrderPage",
    "format_page_label",
    "QueryState",
    "serialize_order",
]
