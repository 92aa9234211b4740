"""Runtime loader for product catalog files."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from tagcart.domain.cart import LineItem
from tagcart.domain.catalog import CatalogError, build_line_items
from tagcart.runtime.logging import get_logger
from tagcart.runtime.paths import get_paths

logger = get_logger(__name__)


def load_products(path: str | Path | None = None, start_id: int = 1) -> list[LineItem]:
    """
    Load a JSON array of product records as undiscounted line items.

    Args:
        path: Catalog file. If None, uses the default products path.
        start_id: Id given to the first item; later items count up from it.

    Returns:
        Line items in file order.
    """
    catalog_path = Path(path) if path is not None else get_paths().products
    if not catalog_path.exists():
        raise FileNotFoundError(f"Product catalog not found: {catalog_path}")

    # utf-8-sig tolerates the BOM some editors write.
    with open(catalog_path, encoding="utf-8-sig") as f:
        try:
            records = json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Invalid JSON in {catalog_path}: {exc}") from exc

    if not isinstance(records, list):
        raise CatalogError(f"Product catalog must be a JSON array: {catalog_path}")

    items = build_line_items(records, start_id=start_id)
    logger.info("Loaded %d products from %s", len(items), catalog_path)
    return items
