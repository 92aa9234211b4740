"""Core domain models for tagcart.

This module provides the core data models and the checkout engine:
- LineItem, Cart: Purchased items and the derived total
- CheckoutEngine: Runs discount rules over a cart
- build_line_items: Product records -> line items

Usage:
    from tagcart.domain import Cart, CheckoutEngine, LineItem
"""

from tagcart.domain.cart import Cart, LineItem
from tagcart.domain.catalog import CatalogError, build_line_item, build_line_items
from tagcart.domain.checkout import CartRule, CheckoutEngine, checkout

__all__ = [
    "LineItem",
    "Cart",
    "CartRule",
    "CheckoutEngine",
    "checkout",
    "CatalogError",
    "build_line_item",
    "build_line_items",
]
