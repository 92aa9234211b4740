"""Data models for a checkout cart."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class LineItem:
    """One purchased unit of a product.

    Only discount rules write ``discount`` and ``discounted``; the cart and the
    checkout engine read them.
    """

    id: int
    sku: str
    name: str
    price: Decimal
    tags: frozenset[str] = field(default_factory=frozenset)
    discount: Decimal = Decimal("0")
    # Set once a rule has claimed this item during the current checkout run.
    discounted: bool = False

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @property
    def net_price(self) -> Decimal:
        return self.price - self.discount

    @property
    def tags_label(self) -> str:
        """Report suffix such as ``", Tags: #drinks,#sale"``; empty when untagged."""
        if not self.tags:
            return ""
        return ", Tags: " + ",".join(f"#{tag}" for tag in sorted(self.tags))


@dataclass
class Cart:
    """Purchased items in insertion order plus the derived checkout total."""

    items: list[LineItem] = field(default_factory=list)
    # Recomputed by the checkout engine; not authoritative between runs.
    total: Decimal = Decimal("0")

    def add_items(self, items: Iterable[LineItem]) -> None:
        self.items.extend(items)

    def compute_total(self) -> Decimal:
        return sum((item.net_price for item in self.items), Decimal("0"))
