"""Module-level API over raw Python classes.

Thin wrappers around TypeScanner for the common case: Python units on
sys.path (or an explicit lookup path), classes in and out.

Example:
    from typescan import get_concrete_classes_with_interface

    for plugin_cls in get_concrete_classes_with_interface("myapp.plugins", Plugin):
        registry.register(plugin_cls())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typescan.application.matching.interfaces import implements_interface as _implements
from typescan.application.services.scanner import TypeScanner
from typescan.domain.model.configuration import ScanConfig
from typescan.infrastructure.adapters.python_type import PythonType

if TYPE_CHECKING:
    from collections.abc import Iterable


def get_all_classes(
    namespace: str | None,
    *,
    lookup_path: Iterable[str] | None = None,
) -> frozenset[type]:
    """Find all classes declared under namespace.

    Args:
        namespace: Dotted package name. None/empty = empty set.
        lookup_path: Locations to search. None = sys.path.

    Returns:
        Frozenset of classes (private __Name classes excluded)

    Raises:
        ScanIOError: If a root or archive cannot be read
    """
    scanner = TypeScanner(_config(lookup_path))
    return _unwrap(scanner.get_all_classes(namespace))


def get_concrete_classes_with_interface(
    namespace: str | None,
    interface: type | None,
    *,
    lookup_path: Iterable[str] | None = None,
) -> frozenset[type]:
    """Find concrete classes under namespace that implement interface.

    Args:
        namespace: Dotted package name. None/empty = empty set.
        interface: Protocol or pure-abstract ABC. Anything else = empty set.
        lookup_path: Locations to search. None = sys.path.

    Returns:
        Frozenset of concrete implementing classes

    Raises:
        ScanIOError: If a root or archive cannot be read
    """
    if not isinstance(interface, type):
        return frozenset()

    scanner = TypeScanner(_config(lookup_path))
    return _unwrap(scanner.get_concrete_classes_with_interface(namespace, PythonType(interface)))


def implements_interface(cls: type | None, interface: type | None) -> bool:
    """Check if cls implements interface through its bases.

    Total: None or non-class arguments give False.
    """
    if not isinstance(cls, type) or not isinstance(interface, type):
        return False
    return _implements(PythonType(cls), PythonType(interface))


def _config(lookup_path: Iterable[str] | None) -> ScanConfig:
    if lookup_path is None:
        return ScanConfig()
    return ScanConfig(lookup_path=tuple(lookup_path))


def _unwrap(types: Iterable[object]) -> frozenset[type]:
    """Python descriptors back to classes."""
    return frozenset(t.cls for t in types if isinstance(t, PythonType))
