"""Stockroom HTTP API package."""

from stockroom.api.routes import dashboard_router, product_router, store_router

__all__ = ["store_router", "product_router", "dashboard_router"]
