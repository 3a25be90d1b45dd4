"""pytest plugin for typescan.

Provides fixtures for plugin-discovery tests:
    typescan_config: Scan configuration (override in conftest.py)
    type_scanner: TypeScanner built from typescan_config

Configuration (pytest.ini or pyproject.toml):
    typescan_lookup_path: Locations to search, one per line (default: sys.path)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from typescan.presentation.pytest_plugin.fixtures import type_scanner, typescan_config

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "type_scanner",
    "typescan_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "typescan_lookup_path",
        type="linelist",
        help="typescan: locations to search for types (default: sys.path)",
        default=[],
    )
