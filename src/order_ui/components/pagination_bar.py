"""
Pagination controls for the orders table.

Page size selector, Previous/Next buttons driven by the has_prev/has_next
flags of the last applied page, and the "Page X of Y" label.
"""

import reflex as rx

from order_ui.state import OrderState


def pagination_bar() -> rx.Component:
    """
    Build the pagination controls.

    Returns:
        The pagination bar component.
    """
    return rx.hstack(
        rx.text("Page Size:"),
        rx.select(
            OrderState.page_size_options,
            value=OrderState.page_size.to_string(),
            on_change=OrderState.change_page_size,
            size="1",
        ),
        rx.button(
            "Previous",
            disabled=~OrderState.has_prev,
            on_click=OrderState.previous_page,
            margin_left="16px",
        ),
        rx.text(OrderState.page_label),
        rx.button(
            "Next",
            disabled=~OrderState.has_next,
            on_click=OrderState.next_page,
        ),
        align="center",
        spacing="2",
        margin_top="16px",
    )
