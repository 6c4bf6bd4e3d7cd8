"""
Order table component for Reflex.

Renders the orders of the current page, a single "Loading..." row while
a fetch is outstanding, or a "No orders found." row when the page is
empty.
"""

import reflex as rx

from order_ui.models.reflex_models import OrderModel
from order_ui.state import OrderState

_COLUMNS = ("Order ID", "Customer ID", "Date", "Total", "Actions")


def order_table() -> rx.Component:
    """
    Build the orders table.

    Returns:
        The table component.
    """
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                *[rx.table.column_header_cell(column) for column in _COLUMNS]
            )
        ),
        rx.table.body(
            rx.cond(
                OrderState.loading,
                _message_row("Loading..."),
                rx.cond(
                    OrderState.is_empty,
                    _message_row("No orders found."),
                    rx.foreach(OrderState.orders, order_row),
                ),
            )
        ),
        width="100%",
    )


def order_row(order: OrderModel) -> rx.Component:
    """Build a single table row with View/Delete actions."""
    return rx.table.row(
        rx.table.cell(order.order_id),
        rx.table.cell(order.customer_id),
        rx.table.cell(order.created_at),
        rx.table.cell(order.formatted_total),
        rx.table.cell(
            rx.hstack(
                rx.button(
                    "View",
                    size="1",
                    on_click=OrderState.view_order(order.order_id),
                ),
                rx.button(
                    "Delete",
                    size="1",
                    color_scheme="gray",
                    on_click=OrderState.delete_order(order.order_id),
                ),
                spacing="2",
            )
        ),
        key=order.order_id,
    )


def _message_row(text: str) -> rx.Component:
    return rx.table.row(
        rx.table.cell(
            text,
            col_span=len(_COLUMNS),
            text_align="center",
        )
    )
