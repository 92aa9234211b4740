"""Same-product add-on: every second unit of a SKU sells at a special price."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from tagcart.domain.cart import Cart, LineItem
from tagcart.rules.base import DiscountRule, unclaimed_with_tag


def group_by_sku(items: Iterable[LineItem]) -> dict[str, list[LineItem]]:
    """Group items by SKU; groups and their members keep cart order."""
    groups: dict[str, list[LineItem]] = {}
    for item in items:
        groups.setdefault(item.sku, []).append(item)
    return groups


def apply_pair_markdown(items: Iterable[LineItem], special_price: Decimal) -> None:
    """Mark down the second item of each same-SKU pair to ``special_price``.

    Each SKU group is walked in order. When a pair completes, its last item
    gets ``price - special_price`` as discount (not clamped, so a special
    price above the unit price yields a negative discount) and both items
    are claimed. A trailing odd item stays unclaimed.
    """
    for group in group_by_sku(items).values():
        matched: list[LineItem] = []
        for item in group:
            matched.append(item)
            if len(matched) % 2 == 0:
                winner = matched[-1]
                winner.discount = winner.price - special_price
                for member in matched:
                    member.discounted = True
                matched.clear()


class TagPairMarkdownRule(DiscountRule):
    """Buy one, get the next unit of the same product for ``special_price``."""

    default_name = "Same-product add-on"

    def __init__(
        self,
        target_tag: str,
        special_price: Decimal,
        *,
        rule_id: int | None = None,
        name: str | None = None,
        note: str | None = None,
    ) -> None:
        self.target_tag = target_tag
        self.special_price = Decimal(special_price)
        super().__init__(rule_id=rule_id, name=name, note=note)

    def describe(self) -> str:
        return f"Add {self.special_price} for one more"

    def process(self, cart: Cart) -> None:
        apply_pair_markdown(unclaimed_with_tag(cart.items, self.target_tag), self.special_price)
