"""Checkout workflow.

Loads the product catalog and the rule list, runs the checkout engine once
over a fresh cart, and renders the receipt.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Literal

from tagcart.domain import Cart, CheckoutEngine
from tagcart.receipt import format_checkout_ledger, format_checkout_report
from tagcart.rules import DiscountRule, default_rules
from tagcart.runtime import get_logger, get_paths, load_products, load_rules

logger = get_logger(__name__)

CheckoutStatus = Literal["ok", "error"]
OutputFormat = Literal["text", "beancount"]


@dataclass(frozen=True)
class CheckoutRequest:
    """Inputs for the checkout workflow."""

    products_file: str | None = None
    rules_file: str | None = None
    use_default_rules: bool = False
    output_format: OutputFormat = "text"
    currency: str = "CAD"
    date: datetime.date | None = None


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome for the checkout workflow."""

    status: CheckoutStatus
    cart: Cart | None = None
    rules: tuple[DiscountRule, ...] = ()
    output: str = ""
    error: str | None = None


def resolve_rules(rules_file: str | None = None, use_default_rules: bool = False) -> list[DiscountRule]:
    """
    Pick the rule list for a checkout.

    Processing order:
    1. Stock rules when asked for explicitly
    2. The given TOML file (a missing file is an error)
    3. The default TOML file, or the stock rules when it does not exist
    """
    if use_default_rules:
        logger.info("Using stock rule list")
        return default_rules()
    if rules_file is None:
        default_path = get_paths().rules
        if not default_path.exists():
            logger.info("No rules file at %s, using stock rule list", default_path)
            return default_rules()
    return load_rules(rules_file)


def run_checkout(request: CheckoutRequest) -> CheckoutResult:
    """Run checkout workflow and return structured result."""
    if request.output_format not in ("text", "beancount"):
        return CheckoutResult(status="error", error=f"Unsupported output format: {request.output_format}")

    try:
        items = load_products(request.products_file)
    except FileNotFoundError as exc:
        return CheckoutResult(status="error", error=str(exc))
    except ValueError as exc:
        return CheckoutResult(status="error", error=f"Could not load products: {exc}")

    try:
        rules = resolve_rules(request.rules_file, request.use_default_rules)
    except FileNotFoundError as exc:
        return CheckoutResult(
            status="error",
            error=f"{exc}\nPass --rules PATH or --default-rules to use the stock rule list.",
        )
    except ValueError as exc:
        return CheckoutResult(status="error", error=f"Could not load rules: {exc}")

    cart = Cart()
    cart.add_items(items)
    engine = CheckoutEngine(rules)
    engine.process_checkout(cart)

    if request.output_format == "beancount":
        output = format_checkout_ledger(cart, date=request.date, currency=request.currency)
    else:
        output = format_checkout_report(cart, currency=request.currency)

    return CheckoutResult(status="ok", cart=cart, rules=tuple(rules), output=output)
