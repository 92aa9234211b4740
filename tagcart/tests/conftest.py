"""Shared pytest fixtures for tagcart tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal
from itertools import count

import pytest

from tagcart.domain.cart import LineItem
from tagcart.runtime.paths import reset_paths

ItemFactory = Callable[..., LineItem]


@pytest.fixture(autouse=True)
def _isolated_project_root(tmp_path, monkeypatch):
    """Point default config/data paths at an empty per-test directory."""
    monkeypatch.setenv("TAGCART_HOME", str(tmp_path))
    reset_paths()
    yield
    reset_paths()


@pytest.fixture
def make_item() -> ItemFactory:
    """Build line items with ids counting up from 1 in creation order."""
    ids = count(1)

    def _make(sku: str, price: str | int, tags: Iterable[str] = (), name: str = "") -> LineItem:
        return LineItem(
            id=next(ids),
            sku=sku,
            name=name or sku,
            price=Decimal(str(price)),
            tags=frozenset(tags),
        )

    return _make
