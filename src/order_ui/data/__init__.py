"""
Static and demo data for the Order List UI.

This package contains fixture data used by DemoOrderService for
development, testing, and demonstrations without a running order API.

Modules:
- demo_orders: Pre-populated Order objects
"""
