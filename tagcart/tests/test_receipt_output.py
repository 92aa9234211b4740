"""Tests for console receipt text and beancount ledger export."""

from __future__ import annotations

import datetime
from decimal import Decimal

from beancount.parser import parser

from tagcart.domain import Cart, CheckoutEngine
from tagcart.domain.cart import LineItem
from tagcart.receipt import (
    build_checkout_transaction,
    format_checkout_ledger,
    format_checkout_report,
    format_item_line,
    format_rule_summary,
)
from tagcart.rules import TagPairMarkdownRule, default_rules


def _checked_out_cart(make_item) -> Cart:
    cart = Cart(items=[make_item("X", 100, {"T"}, name="Latte"), make_item("X", 100, {"T"}, name="Latte")])
    CheckoutEngine([TagPairMarkdownRule("T", Decimal("10"))]).process_checkout(cart)
    return cart


def test_format_item_line() -> None:
    item = LineItem(
        id=1,
        sku="K0132",
        name="Lemon Tea",
        price=Decimal("25"),
        tags=frozenset({"b", "a"}),
        discount=Decimal("15"),
    )
    assert format_item_line(item) == "- 01, [K0132]    25.00, Lemon Tea discount 15.00, Tags: #a,#b"


def test_format_checkout_report(make_item) -> None:
    cart = _checked_out_cart(make_item)

    report = format_checkout_report(cart, currency="TWD")

    lines = report.splitlines()
    assert lines[0] == "Purchased items:"
    assert lines[2] == "- 01, [X]   100.00, Latte discount 0.00, Tags: #T"
    assert lines[3] == "- 02, [X]   100.00, Latte discount 90.00, Tags: #T"
    assert lines[-1] == "Checkout total: 110.00 TWD"


def test_report_does_not_mutate_cart(make_item) -> None:
    cart = _checked_out_cart(make_item)
    before = [(item.discount, item.discounted) for item in cart.items], cart.total

    format_checkout_report(cart)
    format_checkout_ledger(cart)

    assert ([(item.discount, item.discounted) for item in cart.items], cart.total) == before


def test_format_rule_summary() -> None:
    assert format_rule_summary(default_rules()).splitlines() == [
        "- Combo discount (Buy 2 #hot-drinks, 12% off, Add 10 for one more)",
        "- Same-product add-on (Add 10 for one more)",
        "- Buy 2 save (Buy 2 #hot-drinks, 12% off)",
    ]


def test_checkout_transaction_balances(make_item) -> None:
    cart = _checked_out_cart(make_item)

    txn = build_checkout_transaction(cart, date=datetime.date(2026, 1, 2), currency="CAD")

    assert txn.date == datetime.date(2026, 1, 2)
    accounts = [posting.account for posting in txn.postings]
    assert accounts == ["Assets:Cash", "Expenses:Shopping", "Expenses:Shopping", "Income:Discounts"]
    assert sum(posting.units.number for posting in txn.postings) == Decimal("0")
    assert txn.postings[0].units.number == Decimal("-110")


def test_checkout_ledger_text_parses_back(make_item) -> None:
    cart = _checked_out_cart(make_item)

    text = format_checkout_ledger(cart, date=datetime.date(2026, 1, 2), payment_account="Liabilities:CreditCard:CardA")

    entries, errors, _ = parser.parse_string(text)
    assert not errors
    (txn,) = entries
    assert txn.payee == "tagcart"
    assert txn.postings[0].account == "Liabilities:CreditCard:CardA"
    assert sum(posting.units.number for posting in txn.postings) == Decimal("0")
