"""Format a checked-out cart as a console receipt."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol

from tagcart.domain.cart import Cart, LineItem

RULE_LINE = "-" * 51


class DescribedRule(Protocol):
    name: str
    note: str


def _format_amount(value: Decimal) -> str:
    return f"{value:.2f}"


def format_item_line(item: LineItem) -> str:
    """Format one purchased item, e.g. ``- 01, [SKU1]   100.00, Latte discount 0.00, Tags: #drinks``."""
    price = _format_amount(item.price).rjust(8)
    discount = _format_amount(item.discount)
    return f"- {item.id:02d}, [{item.sku}] {price}, {item.name} discount {discount}{item.tags_label}"


def format_checkout_report(cart: Cart, currency: str = "CAD") -> str:
    """
    Format the final cart as a plain-text receipt.

    Args:
        cart: Cart after checkout; it is only read.
        currency: Currency code appended to the total.

    Returns:
        Receipt text ending with a newline
    """
    lines = ["Purchased items:", RULE_LINE]
    lines.extend(format_item_line(item) for item in cart.items)
    lines.append("")
    lines.append(RULE_LINE)
    lines.append(f"Checkout total: {_format_amount(cart.total)} {currency}")
    lines.append("")
    return "\n".join(lines)


def format_rule_summary(rules: Iterable[DescribedRule]) -> str:
    """One ``- name (note)`` line per rule, in run order."""
    lines = []
    for rule in rules:
        if rule.note:
            lines.append(f"- {rule.name} ({rule.note})")
        else:
            lines.append(f"- {rule.name}")
    return "\n".join(lines)
