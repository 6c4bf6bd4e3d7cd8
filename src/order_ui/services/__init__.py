"""
Service factory for the Order List UI.

This module provides the get_order_service() factory function that returns
the appropriate OrderService implementation based on configuration.

Available Implementations:
- demo: In-memory service with static order data (no API required)
- http: REST client for the order API

The service is cached at the module level, so the same instance is reused
across all requests. Configure via ORDER_UI_SERVICE environment variable.
close_order_service() releases the cached instance on app shutdown.
"""

import os
from functools import cache
from typing import Callable, Dict

from order_ui.lib import logs
from order_ui.services.order_service import OrderService
from order_ui.services.order_service_demo import DemoOrderService
from order_ui.services.order_service_impl import HttpOrderService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], OrderService]] = {
    "demo": lambda: DemoOrderService(
        latency=float(os.getenv("ORDER_UI_DEMO_LATENCY", "0.3"))
    ),
    "http": lambda: HttpOrderService(),
}


@cache
def get_order_service(kind: str | None = None) -> OrderService:
    """Return the configured order service implementation."""
    resolved_kind = (kind or os.getenv("ORDER_UI_SERVICE", "demo")).lower()
    LOG.info("get_order_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown order service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


async def close_order_service(kind: str | None = None) -> None:
    """Close the cached service for kind and drop it from the cache."""
    if get_order_service.cache_info().currsize == 0:
        return
    service = get_order_service(kind)
    LOG.info("close_order_service - %s", type(service).__name__)
    get_order_service.cache_clear()
    await service.aclose()


__all__ = [
    "DemoOrderService",
    "HttpOrderService",
    "OrderService",
    "close_order_service",
    "get_order_service",
]
