"""Tests for the combo rule that stacks the add-on markdown with a percentage off."""

from __future__ import annotations

from decimal import Decimal

from tagcart.domain.cart import Cart
from tagcart.rules import CompoundDualTagRule

ADDON = "same-product-addon"
DRINKS = "hot-drinks"


def _rule() -> CompoundDualTagRule:
    return CompoundDualTagRule(ADDON, Decimal("10"), DRINKS, 12)


def test_no_item_with_both_tags_leaves_cart_unchanged(make_item) -> None:
    a = make_item("X", 100, {ADDON})
    b = make_item("X", 100, {ADDON})
    c = make_item("Y", 50, {DRINKS})
    d = make_item("Z", 40, {DRINKS})
    cart = Cart(items=[a, b, c, d])

    _rule().process(cart)

    assert all(item.discount == Decimal("0") for item in cart.items)
    assert not any(item.discounted for item in cart.items)


def test_double_eligible_items_stack_markdown_and_percent(make_item) -> None:
    a = make_item("X", 25, {ADDON, DRINKS})
    b = make_item("X", 25, {ADDON, DRINKS})
    c = make_item("P", 29, {DRINKS})
    cart = Cart(items=[a, b, c])

    _rule().process(cart)

    # Net prices before the percent pass: b=10, a=25, c=29; the cheapest one gets 12% more off.
    assert a.discount == Decimal("0")
    assert b.discount == Decimal("16.2")
    assert c.discount == Decimal("0")
    assert a.discounted and b.discounted and c.discounted
    assert cart.compute_total() == Decimal("62.8")


def test_single_double_eligible_item_gets_both_mechanisms(make_item) -> None:
    partner = make_item("X", 40, {ADDON})
    double = make_item("X", 40, {ADDON, DRINKS})
    c = make_item("Y", 100, {DRINKS})
    d = make_item("Z", 80, {DRINKS})
    cart = Cart(items=[partner, double, c, d])

    _rule().process(cart)

    assert double.discount == Decimal("31.2")
    assert partner.discount == Decimal("0")
    assert partner.discounted
    assert c.discount == d.discount == Decimal("0")
    assert c.discounted and d.discounted
    assert cart.compute_total() == Decimal("228.8")


def test_double_eligible_item_in_expensive_half_gets_no_percent(make_item) -> None:
    double = make_item("X", 100, {ADDON, DRINKS})
    cheap = make_item("Y", 10, {DRINKS})
    cart = Cart(items=[double, cheap])

    _rule().process(cart)

    assert double.discount == Decimal("0")
    assert cheap.discount == Decimal("1.2")
    assert double.discounted and cheap.discounted


def test_single_tag_addon_items_only_get_markdown(make_item) -> None:
    double = make_item("D", 30, {ADDON, DRINKS})
    s1 = make_item("S", 20, {ADDON})
    s2 = make_item("S", 20, {ADDON})
    cart = Cart(items=[double, s1, s2])

    _rule().process(cart)

    assert s1.discount == Decimal("0")
    assert s2.discount == Decimal("10")
    assert s1.discounted and s2.discounted
    # Alone in the percent pass: half of one item is zero items.
    assert double.discount == Decimal("0")
    assert double.discounted


def test_items_claimed_by_earlier_rule_are_left_alone(make_item) -> None:
    claimed = make_item("X", 50, {ADDON, DRINKS})
    claimed.discount = Decimal("7")
    claimed.discounted = True
    cart = Cart(items=[claimed])

    _rule().process(cart)

    assert claimed.discount == Decimal("7")
    assert claimed.discounted


def test_note_joins_both_promotions() -> None:
    rule = _rule()
    assert rule.name == "Combo discount"
    assert rule.note == "Buy 2 #hot-drinks, 12% off, Add 10 for one more"
