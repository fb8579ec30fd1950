"""Catalogue API package."""

from pcstore.api.catalogue.routes import category_router, manufacturer_router, product_router

__all__ = ["category_router", "manufacturer_router", "product_router"]
