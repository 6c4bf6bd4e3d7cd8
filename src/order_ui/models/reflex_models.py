"""
Row models rendered by the Reflex page.

Plain dataclasses are accepted by Reflex state vars and rx.foreach, so
the table rows do not need a Reflex base class.
"""

from dataclasses import dataclass

from order_ui.models.order import Order, serialize_order


@dataclass
class OrderModel:
    """Order row as rendered in the table."""

    order_id: str = ""
    customer_id: str = ""
    created_at: str = ""
    total_price: str = "0"
    formatted_total: str = "$0.00"


def order_to_model(order: Order) -> OrderModel:
    """
    Convert an Order to an OrderModel.

    Args:
        order: Order snapshot from the service.

    Returns:
        OrderModel instance.
    """
    return OrderModel(**serialize_order(order))
