"""
Utility functions for order data manipulation and formatting.

Provides helpers for:
- Decimal parsing of monetary amounts
- Currency formatting
- Search query matching against order fields
- Page slicing for the demo service
"""

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from order_ui.models.order import Order, OrderPage


def parse_decimal(value: Any) -> Decimal:
    """
    Convert a raw JSON amount into a Decimal.

    Missing values are treated as zero. Floats go through str() so that
    0.1 stays 0.1 instead of its binary expansion.

    Raises:
        decimal.InvalidOperation: If the value is not numeric.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_currency(value: Decimal | float, symbol: str = "$") -> str:
    """
    Format an amount with a currency symbol prefix.

    Args:
        value: Numeric amount to format.
        symbol: Currency symbol (e.g., '$').

    Returns:
        Formatted string like '$1,234.56'.
    """
    return f"{symbol}{value:,.2f}"


def matches_query(order: "Order", query: str) -> bool:
    """
    Check if an order matches the search query.

    Performs case-insensitive substring matching against the order's
    searchable terms. An empty query matches everything.
    """
    normalized = query.strip().lower()
    if not normalized:
        return True
    return any(normalized in value for value in order.searchable_terms())


def page_slice(orders: Sequence["Order"], page: int, page_size: int) -> "OrderPage":
    """
    Cut one page out of an ordered sequence of orders.

    Pages past the end come back empty but keep the requested page number,
    so the caller sees has_prev/has_next consistent with what it asked for.

    Args:
        orders: Full, already filtered sequence.
        page: Page number (1-indexed).
        page_size: Number of items per page.

    Returns:
        OrderPage with the slice and pagination metadata.
    """
    from order_ui.models.order import OrderPage

    page, page_size = max(page, 1), max(page_size, 1)
    total_pages = math.ceil(len(orders) / page_size)
    start = (page - 1) * page_size
    return OrderPage(
        items=tuple(orders[start : start + page_size]),
        page=page,
        total_pages=total_pages,
        has_prev=page > 1,
        has_next=page < total_pages,
    )
