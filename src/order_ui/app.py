"""
Reflex application entry point for the Order List UI.

This module initializes the Reflex app and defines the orders page.
"""

import contextlib
import os

import reflex as rx

from order_ui.components.order_table import order_table
from order_ui.components.pagination_bar import pagination_bar
from order_ui.components.search_panel import search_panel
from order_ui.lib import logs
from order_ui.services import close_order_service
from order_ui.state import APP_TITLE, OrderState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("ORDER_UI_PORT", "8000"))
LOG.info("ORDER_UI_SERVICE: %s", os.getenv("ORDER_UI_SERVICE", "demo"))


def index() -> rx.Component:
    """
    Build the orders page layout.

    Returns:
        The page component with header, search, table and pagination.
    """
    return rx.box(
        rx.box(
            search_panel(),
            rx.box(
                order_table(),
                pagination_bar(),
                class_name="card",
            ),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=["/styles.css"],
)


@contextlib.asynccontextmanager
async def _close_order_service():
    """Close the shared order service client when the server stops."""
    yield
    await close_order_service()


app.register_lifespan_task(_close_order_service)

app.add_page(
    index,
    route="/orders",
    title=APP_TITLE,
    on_load=OrderState.on_load,
)


def main() -> None:
    """Entrypoint used by `uv run order_ui`."""
    # In production, use `reflex run` instead
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)])


if __name__ == "__main__":
    main()
