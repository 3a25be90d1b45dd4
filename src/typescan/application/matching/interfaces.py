"""Interface conformance over type descriptor graphs.

Two walks:
- class chain: type -> superclass -> ... -> root (None)
- extension lattice: interface -> interfaces it extends (+ superclass link)

Hierarchies are acyclic by language rules; both walks still keep a
visited set so malformed host metadata cannot loop forever.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typescan.domain.ports.type_descriptor import TypeDescriptor


def implements_interface(
    type_: TypeDescriptor | None,
    interface: TypeDescriptor | None,
) -> bool:
    """Check if type_ implements interface, directly or transitively.

    True iff some interface declared on type_ or on any of its ancestors
    is interface-equal to interface (see is_interface_equal). Total over
    None: invalid input is False, never an error.

    Args:
        type_: Candidate type
        interface: Target, must be interface-kind

    Returns:
        True if type_ conforms to interface
    """
    if type_ is None or interface is None or not interface.is_interface:
        return False

    visited: set[TypeDescriptor] = set()
    current: TypeDescriptor | None = type_

    while current is not None and current not in visited:
        visited.add(current)
        for declared in current.declared_interfaces():
            if is_interface_equal(declared, interface):
                return True
        current = current.superclass()

    return False


def is_interface_equal(
    candidate: TypeDescriptor | None,
    interface: TypeDescriptor | None,
) -> bool:
    """Check if candidate is interface, or extends it transitively.

    Identity first, then walks up candidate's extension lattice: the
    interfaces it declares and its superclass link.

    Args:
        candidate: Interface declared somewhere in a class chain
        interface: Target interface

    Returns:
        True if candidate narrows (or is) interface
    """
    if candidate is None or interface is None:
        return False

    pending: list[TypeDescriptor] = [candidate]
    visited: set[TypeDescriptor] = set()

    while pending:
        current = pending.pop()
        if current == interface:
            return True
        if current in visited:
            continue
        visited.add(current)

        pending.extend(current.declared_interfaces())
        parent = current.superclass()
        if parent is not None:
            pending.append(parent)

    return False
