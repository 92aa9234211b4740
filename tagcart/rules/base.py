"""Base class for checkout discount rules.

Every rule receives the whole cart and mutates the ``discount`` and
``discounted`` fields of the items it claims. Rules never add, remove or
reorder items.

Subclasses should define:
    default_name: str - human readable rule name

And implement:
    process(cart) - claim items and assign their discounts

Optionally override:
    describe() - note shown next to the rule name in reports
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from decimal import Decimal

from tagcart.domain.cart import Cart, LineItem


class DiscountRule(ABC):
    """A discount algorithm with fixed parameters, applied once per checkout."""

    default_name: str = ""

    def __init__(self, *, rule_id: int | None = None, name: str | None = None, note: str | None = None) -> None:
        # Subclasses set their parameters before calling this, so describe() can use them.
        self.id = rule_id
        self.name = name if name is not None else self.default_name
        self.note = note if note is not None else self.describe()

    def describe(self) -> str:
        return ""

    @abstractmethod
    def process(self, cart: Cart) -> None:
        """Claim matching items in ``cart`` and set their discounts in place."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r}, name={self.name!r}, note={self.note!r})"


def unclaimed_with_tag(items: Iterable[LineItem], tag: str) -> list[LineItem]:
    """Items carrying ``tag`` that no rule has claimed yet, in cart order."""
    return [item for item in items if item.has_tag(tag) and not item.discounted]


def percent_of(amount: Decimal, percent_off: int) -> Decimal:
    return amount * percent_off / 100
