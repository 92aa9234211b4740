"""Checkout receipt output: console text and beancount ledger export."""

from tagcart.receipt.formatter import format_checkout_report, format_item_line, format_rule_summary
from tagcart.receipt.ledger import build_checkout_transaction, format_checkout_ledger

__all__ = [
    "format_checkout_report",
    "format_item_line",
    "format_rule_summary",
    "build_checkout_transaction",
    "format_checkout_ledger",
]
