"""Buy-two-save: every two items of a tag get a percentage off."""

from __future__ import annotations

from tagcart.domain.cart import Cart
from tagcart.rules.base import DiscountRule, percent_of, unclaimed_with_tag


class TagPairPercentOffRule(DiscountRule):
    """Pair tagged items from the most expensive down; both items of a pair get ``percent_off``%.

    Sorting by descending price pairs the two most expensive units first. An
    odd count leaves the cheapest item unpaired and untouched.
    """

    default_name = "Buy 2 save"

    def __init__(
        self,
        target_tag: str,
        percent_off: int,
        *,
        rule_id: int | None = None,
        name: str | None = None,
        note: str | None = None,
    ) -> None:
        self.target_tag = target_tag
        self.percent_off = percent_off
        super().__init__(rule_id=rule_id, name=name, note=note)

    def describe(self) -> str:
        return f"Buy 2 #{self.target_tag}, {self.percent_off}% off"

    def process(self, cart: Cart) -> None:
        # sorted() is stable, so equal prices keep cart order.
        eligible = sorted(
            unclaimed_with_tag(cart.items, self.target_tag),
            key=lambda item: item.price,
            reverse=True,
        )
        for first, second in zip(eligible[0::2], eligible[1::2]):
            for item in (first, second):
                item.discount = percent_of(item.price, self.percent_off)
                item.discounted = True
