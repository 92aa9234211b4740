"""Build discount rule lists from in-memory configuration tables.

Each table is a mapping with a ``type`` key and the parameters of that rule
type. Tables usually come from ``[[rules]]`` entries in a TOML file (see
``tagcart.runtime.rule_config``), but any mapping works:

    [[rules]]
    type = "compound"
    amount_tag = "same-product-addon"
    amount = "10"
    percent_tag = "hot-drinks"
    percent_off = 12

    [[rules]]
    type = "markdown"
    tag = "same-product-addon"
    special_price = "10"

    [[rules]]
    type = "percent_off"
    tag = "hot-drinks"
    percent_off = 12

Optional ``id`` and ``name`` keys override rule metadata. Parameter values are
not range-checked here.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from tagcart.rules.base import DiscountRule
from tagcart.rules.compound import CompoundDualTagRule
from tagcart.rules.markdown import TagPairMarkdownRule
from tagcart.rules.percent_off import TagPairPercentOffRule


class RuleConfigError(ValueError):
    """A rule table is missing keys or names an unknown rule type."""


def _require(config: Mapping[str, Any], key: str, index: int) -> Any:
    value = config.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise RuleConfigError(f"Rule #{index} ({config.get('type')}): missing '{key}'")
    return value


def _tag(config: Mapping[str, Any], key: str, index: int) -> str:
    return str(_require(config, key, index)).strip()


def _money(config: Mapping[str, Any], key: str, index: int) -> Decimal:
    raw = _require(config, key, index)
    try:
        return Decimal(str(raw).strip())
    except InvalidOperation as exc:
        raise RuleConfigError(f"Rule #{index}: '{key}' is not a number: {raw!r}") from exc


def _percent(config: Mapping[str, Any], key: str, index: int) -> int:
    raw = _require(config, key, index)
    if isinstance(raw, bool):
        raise RuleConfigError(f"Rule #{index}: '{key}' must be an integer percent, got {raw!r}")
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise RuleConfigError(f"Rule #{index}: '{key}' must be an integer percent, got {raw!r}") from exc


def _metadata(config: Mapping[str, Any], index: int) -> dict[str, Any]:
    metadata: dict[str, Any] = {}
    raw_id = config.get("id")
    if raw_id is not None:
        if isinstance(raw_id, bool):
            raise RuleConfigError(f"Rule #{index}: 'id' must be an integer, got {raw_id!r}")
        try:
            metadata["rule_id"] = int(str(raw_id).strip())
        except ValueError as exc:
            raise RuleConfigError(f"Rule #{index}: 'id' must be an integer, got {raw_id!r}") from exc
    if config.get("name"):
        metadata["name"] = str(config["name"])
    if config.get("note"):
        metadata["note"] = str(config["note"])
    return metadata


def _build_markdown(config: Mapping[str, Any], index: int) -> DiscountRule:
    return TagPairMarkdownRule(
        _tag(config, "tag", index),
        _money(config, "special_price", index),
        **_metadata(config, index),
    )


def _build_percent_off(config: Mapping[str, Any], index: int) -> DiscountRule:
    return TagPairPercentOffRule(
        _tag(config, "tag", index),
        _percent(config, "percent_off", index),
        **_metadata(config, index),
    )


def _build_compound(config: Mapping[str, Any], index: int) -> DiscountRule:
    return CompoundDualTagRule(
        _tag(config, "amount_tag", index),
        _money(config, "amount", index),
        _tag(config, "percent_tag", index),
        _percent(config, "percent_off", index),
        **_metadata(config, index),
    )


RULE_BUILDERS: dict[str, Callable[[Mapping[str, Any], int], DiscountRule]] = {
    "markdown": _build_markdown,
    "percent_off": _build_percent_off,
    "compound": _build_compound,
}


def build_rule(config: Mapping[str, Any], index: int = 1) -> DiscountRule:
    """Build a single rule; ``index`` is only used in error messages."""
    if not isinstance(config, Mapping):
        raise RuleConfigError(f"Rule #{index}: expected a table, got {type(config).__name__}")
    rule_type = str(config.get("type", "")).strip().lower()
    builder = RULE_BUILDERS.get(rule_type)
    if builder is None:
        known = ", ".join(sorted(RULE_BUILDERS))
        raise RuleConfigError(f"Rule #{index}: unknown rule type {rule_type!r} (expected one of: {known})")
    return builder(config, index)


def build_rules(configs: Sequence[Mapping[str, Any]]) -> list[DiscountRule]:
    """Build rules in configuration order; order decides which rule claims an item first."""
    return [build_rule(config, index) for index, config in enumerate(configs, start=1)]


def default_rules() -> list[DiscountRule]:
    """The stock rule list: combo first, then the two single-tag promotions."""
    return [
        CompoundDualTagRule("same-product-addon", Decimal("10"), "hot-drinks", 12, rule_id=1),
        TagPairMarkdownRule("same-product-addon", Decimal("10"), rule_id=2),
        TagPairPercentOffRule("hot-drinks", 12, rule_id=3),
    ]
