"""Checkout engine: applies discount rules to a cart and settles the total."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol

from tagcart.domain.cart import Cart

logger = logging.getLogger(__name__)


class CartRule(Protocol):
    """Minimal rule contract required by the checkout engine."""

    name: str

    def process(self, cart: Cart) -> None: ...


class CheckoutEngine:
    """Point-of-sale checkout over an ordered rule list.

    Rules run in list order. A rule sees the ``discounted`` flags left by the
    rules before it, so reordering the list can change the result.

    Checkout is not idempotent: run it once per cart. A second run on the same
    cart does not fail, but rules that release and re-claim items may assign
    different discounts.
    """

    def __init__(self, rules: Iterable[CartRule] = ()) -> None:
        self.rules: list[CartRule] = list(rules)

    def add_rule(self, rule: CartRule) -> None:
        self.rules.append(rule)

    def add_rules(self, rules: Iterable[CartRule]) -> None:
        for rule in rules:
            self.add_rule(rule)

    def process_checkout(self, cart: Cart) -> bool:
        """Run every rule over ``cart`` and recompute ``cart.total``.

        Returns:
            Always True; rules do not fail on a well-formed cart.
        """
        for rule in self.rules:
            claimed_before = _count_claimed(cart)
            rule.process(cart)
            logger.debug(
                "Rule %s claimed %d item(s)",
                getattr(rule, "name", "") or rule.__class__.__name__,
                _count_claimed(cart) - claimed_before,
            )

        cart.total = cart.compute_total()
        logger.info("Checkout total %s over %d item(s) after %d rule(s)", cart.total, len(cart.items), len(self.rules))
        return True


def _count_claimed(cart: Cart) -> int:
    return sum(1 for item in cart.items if item.discounted)


def checkout(cart: Cart, rules: Iterable[CartRule]) -> Decimal:
    """One-shot helper: run ``rules`` over ``cart`` and return the new total."""
    CheckoutEngine(rules).process_checkout(cart)
    return cart.total
