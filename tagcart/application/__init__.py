"""Application workflows for tagcart."""

from tagcart.application.checkout import CheckoutRequest, CheckoutResult, resolve_rules, run_checkout

__all__ = [
    "CheckoutRequest",
    "CheckoutResult",
    "resolve_rules",
    "run_checkout",
]
