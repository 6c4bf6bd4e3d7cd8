"""Demo orders used by DemoOrderService."""

from datetime import date, timedelta
from decimal import Decimal

from order_ui.models.order import Order

_CUSTOMERS = (
    "alice@example.com",
    "bob.martin@example.com",
    "carol.nguyen@example.com",
    "dave@example.org",
    "erin.okafor@example.com",
    "frank@example.net",
    "grace.li@example.com",
)

_FIRST_DAY = date(2024, 1, 3)


def _demo_order(index: int) -> Order:
    created = _FIRST_DAY + timedelta(days=index * 3)
    cents = (index * 7919) % 250000 + 1999
    return Order(
        order_id=str(1001 + index),
        customer_id=_CUSTOMERS[index % len(_CUSTOMERS)],
        created_at=created.isoformat(),
        total_price=Decimal(cents) / 100,
    )


DEMO_ORDERS: tuple[Order, ...] = tuple(_demo_order(index) for index in range(137))
