"""Runtime loader for the discount rule list."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tagcart.rules import DiscountRule, build_rules
from tagcart.runtime.logging import get_logger
from tagcart.runtime.paths import get_paths

logger = get_logger(__name__)


def load_rule_configs(config_path: str | Path | None = None) -> list[dict[str, Any]]:
    """
    Load ``[[rules]]`` tables from TOML.

    Returns:
        Rule tables preserving file order.
    """
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    path = Path(config_path) if config_path is not None else get_paths().rules
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")

    with open(path, "rb") as f:
        config = tomllib.load(f)

    rules = config.get("rules", [])
    if not isinstance(rules, list) or not rules:
        raise ValueError(f"No discount rules found in {path}")

    logger.debug("Loaded %d rule tables from %s", len(rules), path)
    return rules


def load_rules(config_path: str | Path | None = None) -> list[DiscountRule]:
    """Load the rule list from TOML and build the rule objects in file order."""
    return build_rules(load_rule_configs(config_path))
