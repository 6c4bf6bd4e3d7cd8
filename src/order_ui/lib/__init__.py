"""
Local library modules shared across the Order List UI.

Modules:
    logs: Logging utilities
"""

from order_ui.lib import logs

__all__ = ["logs"]
