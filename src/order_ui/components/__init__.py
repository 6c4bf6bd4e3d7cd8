"""
Reflex UI components for the Order List application.

- order_table: Orders table with loading and empty rows
- pagination_bar: Page size selector and Previous/Next controls
- search_panel: Header with "Add New Order" and the search input

Components read from and dispatch to order_ui.state.OrderState.
"""
