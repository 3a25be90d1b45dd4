"""Interface predicate (needs the matcher, so it lives in application)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typescan.application.matching.interfaces import implements_interface

if TYPE_CHECKING:
    from typescan.domain.predicates.base import TypePredicate
    from typescan.domain.ports.type_descriptor import TypeDescriptor


def implements(interface: TypeDescriptor) -> TypePredicate:
    """Create predicate: type implements interface (transitively).

    Args:
        interface: Target interface descriptor

    Returns:
        Predicate function
    """

    def predicate(type_: TypeDescriptor) -> bool:
        return implements_interface(type_, interface)

    return predicate
