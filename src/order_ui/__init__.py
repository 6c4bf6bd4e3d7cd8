"""
Order List UI: A Reflex application for browsing sales orders.

This package provides a paginated, searchable orders list with view,
create and delete actions delegated to a remote order service.

Subpackages:
- components: Reflex UI components
- models: Order, OrderPage and QueryState
- services: Data access layer (demo and HTTP implementations)
- data: Static demo fixtures

Core modules:
- coordinator: Issues fetches and suppresses stale responses
- controller: OrderListController, the framework-independent list logic
- state: Reflex page state

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
