"""Checkout discount rules.

All rules inherit from DiscountRule and are applied by
tagcart.domain.checkout.CheckoutEngine in the order they are configured:

    from tagcart.rules import CompoundDualTagRule, TagPairMarkdownRule, TagPairPercentOffRule

    RULES = [
        CompoundDualTagRule("same-product-addon", Decimal("10"), "hot-drinks", 12),
        TagPairMarkdownRule("same-product-addon", Decimal("10")),
        TagPairPercentOffRule("hot-drinks", 12),
    ]

Later rules skip items already claimed by earlier ones.
"""

from .base import DiscountRule
from .compound import CompoundDualTagRule
from .markdown import TagPairMarkdownRule
from .percent_off import TagPairPercentOffRule
from .registry import RuleConfigError, build_rule, build_rules, default_rules

__all__ = [
    "DiscountRule",
    "TagPairMarkdownRule",
    "TagPairPercentOffRule",
    "CompoundDualTagRule",
    "RuleConfigError",
    "build_rule",
    "build_rules",
    "default_rules",
]
