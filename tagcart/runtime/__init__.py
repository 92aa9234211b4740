"""Runtime infrastructure for tagcart.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Catalog and rule-list loading from files

Usage:
    from tagcart.runtime import get_logger, get_paths, load_products, load_rules

    logger = get_logger(__name__)
    items = load_products()
    rules = load_rules()
"""

from tagcart.runtime.catalog_loader import load_products
from tagcart.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from tagcart.runtime.paths import ProjectPaths, get_paths, reset_paths
from tagcart.runtime.rule_config import load_rule_configs, load_rules

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Loaders
    "load_products",
    "load_rule_configs",
    "load_rules",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
