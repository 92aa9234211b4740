"""Centralized path management for tagcart.

This module provides a single source of truth for the default locations of
the product catalog and the rule configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the project root directory.

    TAGCART_HOME wins; otherwise the current working directory is used so the
    CLI picks up ./config and ./data next to where it is run.
    """
    home = os.environ.get("TAGCART_HOME", "").strip()
    if home:
        return Path(home).expanduser()
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for all project-related paths."""

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def rules(self) -> Path:
        """Discount rule list TOML file."""
        return self.config / "rules.toml"

    # --- Data paths ---
    @property
    def data(self) -> Path:
        """Data directory (data/)."""
        return self.root / "data"

    @property
    def products(self) -> Path:
        """Product catalog JSON file."""
        return self.data / "products.json"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance.

    Returns:
        The global ProjectPaths instance.
    """
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Forget the cached ProjectPaths so the next get_paths() re-reads TAGCART_HOME."""
    global _paths
    _paths = None
