"""Effective lookup path: explicit config or the ambient sys.path."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typescan.domain.model.configuration import ScanConfig


def ambient_lookup_path() -> tuple[str, ...]:
    """Snapshot of sys.path at call time."""
    return tuple(sys.path)


def resolve_lookup_path(config: ScanConfig) -> tuple[str, ...]:
    """Locations to search for config.

    Args:
        config: Scan configuration

    Returns:
        config.lookup_path, or the ambient sys.path when it is None
    """
    if config.lookup_path is None:
        return ambient_lookup_path()
    return config.lookup_path
