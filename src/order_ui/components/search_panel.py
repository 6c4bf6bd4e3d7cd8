"""
Search panel component for the Order List UI.

Provides the page header with the "Add New Order" action and the search
input.
"""

import reflex as rx

from order_ui.state import APP_TITLE, SEARCH_PLACEHOLDER, OrderState


def search_panel() -> rx.Component:
    """
    Build the header and search input.

    Returns:
        The search panel component.
    """
    return rx.box(
        rx.box(
            rx.heading(APP_TITLE, size="6", as_="h2"),
            rx.button(
                "Add New Order",
                on_click=OrderState.create_order,
                color_scheme="blue",
            ),
            class_name="card-header",
        ),
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                id="search",
                placeholder=SEARCH_PLACEHOLDER,
                value=OrderState.search_term,
                on_change=OrderState.search,
                class_name="search-input",
                width="100%",
            ),
            class_name="input-with-icon",
        ),
        class_name="card search-card",
    )
