"""
Order domain models and serialization helpers.

An Order is an immutable snapshot received from the remote store. An
OrderPage is one page of orders together with the pagination metadata the
store reported for it; it is always replaced as a whole, never merged.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from order_ui.utils import format_currency


@dataclass(frozen=True, slots=True)
class Order:
    """A single sales order as listed by the remote store."""

    order_id: str
    customer_id: str
    created_at: str
    total_price: Decimal = Decimal("0")

    def formatted_total(self) -> str:
        """Return the total price formatted for display."""
        return format_currency(self.total_price)

    def searchable_terms(self) -> List[str]:
        """Return the terms that should be matched when filtering."""
        terms = [self.order_id, self.customer_id, self.created_at]
        return [value.lower() for value in terms if value]


@dataclass(frozen=True, slots=True)
class OrderPage:
    """
    One page of orders plus pagination metadata.

    has_prev and has_next are trusted as reported by the store; they are
    never recomputed from page and total_pages.
    """

    items: tuple[Order, ...] = field(default_factory=tuple)
    page: int = 1
    total_pages: int = 0
    has_prev: bool = False
    has_next: bool = False


def format_page_label(page: int, total_pages: int) -> str:
    """Return the "Page X of Y" label, showing at least one page."""
    return f"Page {page} of {total_pages or 1}"


def serialize_order(order: Order) -> dict:
    """Convert an Order into a JSON serializable dictionary."""
    return {
        "order_id": order.order_id,
        "customer_id": order.customer_id,
        "created_at": order.created_at,
        "total_price": str(order.total_price),
        "formatted_total": order.formatted_total(),
    }
