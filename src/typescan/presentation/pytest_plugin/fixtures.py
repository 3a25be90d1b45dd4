"""pytest fixtures for plugin-discovery tests.

User overrides typescan_config in their conftest.py.
"""

from __future__ import annotations

from urllib.parse import urlsplit

import pytest

from typescan.application.services.scanner import TypeScanner
from typescan.domain.model.configuration import ScanConfig


def lookup_path_from_ini(config: pytest.Config) -> tuple[str, ...] | None:
    """Read typescan_lookup_path ini option.

    Relative entries are resolved against rootdir; URLs (file:/abs, file:///abs)
    are passed through untouched.

    Returns:
        Tuple of locations, or None when the option is not set
    """
    lines = [line.strip() for line in config.getini("typescan_lookup_path")]
    lines = [line for line in lines if line]
    if not lines:
        return None

    return tuple(line if _is_url(line) else str(config.rootpath / line) for line in lines)


def _is_url(location: str) -> bool:
    """Check if location carries a URL scheme (single letters are drives)."""
    return len(urlsplit(location).scheme) > 1


@pytest.fixture(scope="session")
def typescan_config(request: pytest.FixtureRequest) -> ScanConfig:
    """Scan configuration for tests.

    Uses typescan_lookup_path from pytest.ini / pyproject.toml when set,
    the ambient sys.path otherwise. Override in conftest.py for more.

    Returns:
        ScanConfig
    """
    return ScanConfig(lookup_path=lookup_path_from_ini(request.config))


@pytest.fixture(scope="session")
def type_scanner(typescan_config: ScanConfig) -> TypeScanner:
    """TypeScanner built from typescan_config.

    Returns:
        TypeScanner with the default Python resolver
    """
    return TypeScanner(typescan_config)
