"""Ordering API package."""

from pcstore.api.ordering.routes import cart_item_router, order_router

__all__ = ["cart_item_router", "order_router"]
