"""Storefront API package."""

from storefront.api.errors import register_error_handlers
from storefront.api.routes import init_router, order_router, product_router, user_router

__all__ = ["init_router", "product_router", "user_router", "order_router", "register_error_handlers"]
