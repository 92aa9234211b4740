"""Pure helpers that turn product records into cart line items."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from tagcart.domain.cart import LineItem


class CatalogError(ValueError):
    """A product record cannot be turned into a line item."""


def _normalize_keys(record: Mapping[str, Any]) -> dict[str, Any]:
    # Catalog files written for other tools use "SKU"/"Price"/"Tags" casing.
    return {str(key).strip().lower(): value for key, value in record.items()}


def _parse_price(raw: Any, index: int) -> Decimal:
    if raw is None or isinstance(raw, bool):
        raise CatalogError(f"Product #{index}: missing price")
    try:
        price = Decimal(str(raw).strip())
    except InvalidOperation as exc:
        raise CatalogError(f"Product #{index}: invalid price {raw!r}") from exc
    if not price.is_finite() or price < 0:
        raise CatalogError(f"Product #{index}: price must be a non-negative amount, got {raw!r}")
    return price


def _parse_tags(raw: Any, index: int) -> frozenset[str]:
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        value = raw.strip()
        return frozenset((value,)) if value else frozenset()
    if isinstance(raw, (list, tuple, set, frozenset)):
        return frozenset(str(tag).strip() for tag in raw if str(tag).strip())
    raise CatalogError(f"Product #{index}: tags must be a list of strings, got {type(raw).__name__}")


def build_line_item(record: Mapping[str, Any], item_id: int, *, index: int = 0) -> LineItem:
    """Build one undiscounted line item; ``index`` is only used in error messages."""
    if not isinstance(record, Mapping):
        raise CatalogError(f"Product #{index}: expected an object, got {type(record).__name__}")

    fields = _normalize_keys(record)
    sku = str(fields.get("sku") or "").strip()
    if not sku:
        raise CatalogError(f"Product #{index}: missing sku")

    return LineItem(
        id=item_id,
        sku=sku,
        name=str(fields.get("name") or ""),
        price=_parse_price(fields.get("price"), index),
        tags=_parse_tags(fields.get("tags"), index),
    )


def iter_line_items(records: Sequence[Mapping[str, Any]], start_id: int = 1) -> Iterator[LineItem]:
    """Yield line items with ids assigned monotonically from ``start_id``.

    Any ``Id`` field already present in a record is ignored.
    """
    for index, record in enumerate(records):
        yield build_line_item(record, start_id + index, index=index)


def build_line_items(records: Sequence[Mapping[str, Any]], start_id: int = 1) -> list[LineItem]:
    return list(iter_line_items(records, start_id=start_id))
