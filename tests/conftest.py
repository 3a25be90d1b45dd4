"""Shared fixtures: on-disk plugin packages and import isolation."""

from __future__ import annotations

import sys
import uuid
from collections.abc import Iterator

import pytest


@pytest.fixture
def isolated_modules() -> Iterator[None]:
    """Drop modules imported during the test from sys.modules afterwards."""
    before = set(sys.modules)
    yield
    for name in set(sys.modules) - before:
        del sys.modules[name]


@pytest.fixture
def package_name(isolated_modules: None) -> str:
    """Unique top-level package name, so imports never hit a cached module."""
    return f"acme_{uuid.uuid4().hex[:12]}"


@pytest.fixture
def on_sys_path(monkeypatch: pytest.MonkeyPatch):  # noqa: ANN201
    """Callable adding a location to the front of sys.path for one test."""

    def add(location: object) -> None:
        monkeypatch.syspath_prepend(str(location))

    return add
