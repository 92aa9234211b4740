"""Combo discount: same-product add-on stacked with a percentage off.

Items carrying both tags can get the add-on markdown and then a percentage
off their marked-down price. Items carrying only one of the tags get only
the mechanism for that tag.
"""

from __future__ import annotations

from decimal import Decimal

from tagcart.domain.cart import Cart
from tagcart.rules.base import DiscountRule, percent_of, unclaimed_with_tag
from tagcart.rules.markdown import TagPairMarkdownRule, apply_pair_markdown
from tagcart.rules.percent_off import TagPairPercentOffRule


class CompoundDualTagRule(DiscountRule):
    """Run the add-on markdown for ``amount_tag``, then a percentage off for ``percent_tag``.

    Does nothing unless at least one unclaimed item carries both tags.

    Processing order:
    1. Snapshot unclaimed items carrying both tags
    2. Same-SKU pair markdown over ``amount_tag`` items
    3. Release the snapshot items again, whatever step 2 did to them
    4. Sort unclaimed ``percent_tag`` items by net price, cheapest first; the
       cheaper half gets ``percent_off``% of its net price added to its
       discount, and the whole set is claimed
    """

    default_name = "Combo discount"

    def __init__(
        self,
        amount_tag: str,
        amount_value: Decimal,
        percent_tag: str,
        percent_off: int,
        *,
        rule_id: int | None = None,
        name: str | None = None,
        note: str | None = None,
    ) -> None:
        self.amount_tag = amount_tag
        self.amount_value = Decimal(amount_value)
        self.percent_tag = percent_tag
        self.percent_off = percent_off
        super().__init__(rule_id=rule_id, name=name, note=note)

    def describe(self) -> str:
        percent_note = TagPairPercentOffRule(self.percent_tag, self.percent_off).note
        amount_note = TagPairMarkdownRule(self.amount_tag, self.amount_value).note
        return f"{percent_note}, {amount_note}"

    def process(self, cart: Cart) -> None:
        double_eligible = [
            item for item in unclaimed_with_tag(cart.items, self.amount_tag) if item.has_tag(self.percent_tag)
        ]
        if not double_eligible:
            return

        apply_pair_markdown(unclaimed_with_tag(cart.items, self.amount_tag), self.amount_value)

        # Re-open double-eligible items for the percentage pass.
        for item in double_eligible:
            item.discounted = False

        candidates = sorted(unclaimed_with_tag(cart.items, self.percent_tag), key=lambda item: item.net_price)
        remaining = len(candidates) // 2
        for item in candidates:
            if remaining > 0:
                item.discount += percent_of(item.net_price, self.percent_off)
                remaining -= 1
            item.discounted = True
