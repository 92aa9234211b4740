"""Export a checked-out cart as a beancount transaction."""

from __future__ import annotations

import datetime
import io
from decimal import Decimal

from beancount.core import amount, data, flags
from beancount.parser import printer

from tagcart.domain.cart import Cart

DEFAULT_PAYMENT_ACCOUNT = "Assets:Cash"
DEFAULT_EXPENSE_ACCOUNT = "Expenses:Shopping"
DEFAULT_DISCOUNT_ACCOUNT = "Income:Discounts"


def _posting(account: str, number: Decimal, currency: str) -> data.Posting:
    return data.Posting(account, amount.Amount(number, currency), None, None, None, None)


def build_checkout_transaction(
    cart: Cart,
    *,
    date: datetime.date | None = None,
    payee: str = "tagcart",
    narration: str = "Checkout",
    payment_account: str = DEFAULT_PAYMENT_ACCOUNT,
    expense_account: str = DEFAULT_EXPENSE_ACCOUNT,
    discount_account: str = DEFAULT_DISCOUNT_ACCOUNT,
    currency: str = "CAD",
) -> data.Transaction:
    """Build a balanced transaction for the checkout.

    Postings:
    - payment account: minus the cart total
    - expense account: each item at its original price
    - discount account: minus each non-zero item discount

    The postings sum to zero because the cart total is the sum of
    ``price - discount`` over all items.
    """
    txn = data.Transaction(
        meta=data.new_metadata("tagcart", 0),
        date=date or datetime.date.today(),
        flag=flags.FLAG_OKAY,
        payee=payee,
        narration=narration,
        tags=frozenset(),
        links=frozenset(),
        postings=list(),
    )

    txn.postings.append(_posting(payment_account, -cart.total, currency))
    for item in cart.items:
        txn.postings.append(_posting(expense_account, item.price, currency))
        if item.discount:
            txn.postings.append(_posting(discount_account, -item.discount, currency))
    return txn


def format_checkout_ledger(cart: Cart, **kwargs: object) -> str:
    """Render the checkout transaction as beancount text; accepts build_checkout_transaction keywords."""
    txn = build_checkout_transaction(cart, **kwargs)  # type: ignore[arg-type]
    output_buffer = io.StringIO()
    printer.print_entries([txn], file=output_buffer)
    return output_buffer.getvalue()
