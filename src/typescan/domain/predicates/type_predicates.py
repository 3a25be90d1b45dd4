"""Type predicates."""

from __future__ import annotations

from fnmatch import fnmatch
from typing import TYPE_CHECKING

from typescan.domain.model.enums import Visibility
from typescan.domain.predicates.base import TypePredicate

if TYPE_CHECKING:
    from typescan.domain.ports.type_descriptor import TypeDescriptor


def is_concrete() -> TypePredicate:
    """Create predicate: type is neither abstract nor interface-kind.

    Returns:
        Predicate function
    """

    def predicate(type_: TypeDescriptor) -> bool:
        return not type_.is_abstract and not type_.is_interface

    return predicate


def is_interface() -> TypePredicate:
    """Create predicate: type is interface-kind.

    Returns:
        Predicate function
    """

    def predicate(type_: TypeDescriptor) -> bool:
        return type_.is_interface

    return predicate


def is_private() -> TypePredicate:
    """Create predicate: type is PRIVATE (__Name).

    Returns:
        Predicate function
    """

    def predicate(type_: TypeDescriptor) -> bool:
        return type_.visibility is Visibility.PRIVATE

    return predicate


def has_name_matching(pattern: str) -> TypePredicate:
    """Create predicate: fully qualified name matches glob pattern.

    Args:
        pattern: fnmatch pattern (e.g. "myapp.plugins.*Plugin")

    Returns:
        Predicate function
    """

    def predicate(type_: TypeDescriptor) -> bool:
        return fnmatch(type_.name, pattern)

    return predicate


def all_of(*predicates: TypePredicate) -> TypePredicate:
    """Create predicate: every given predicate holds.

    Returns:
        Predicate function (always True when no predicates given)
    """

    def predicate(type_: TypeDescriptor) -> bool:
        return all(p(type_) for p in predicates)

    return predicate
