"""Type descriptor port: host-runtime type metadata as data.

The matcher only talks to this Protocol, so any host that can answer
these questions (live Python classes, JVM reflection dumps, test fakes)
plugs in without touching the graph walk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typescan.domain.model.enums import Visibility


@runtime_checkable
class TypeDescriptor(Protocol):
    """Contract for resolved type metadata.

    Equality and hashing MUST follow type identity: two descriptors of the
    same host type are equal, descriptors of different types never are.
    Descriptors are owned by the host and never mutated.
    """

    @property
    def name(self) -> str:
        """Fully qualified type name."""
        ...

    @property
    def is_abstract(self) -> bool:
        """Type cannot be instantiated as-is."""
        ...

    @property
    def is_interface(self) -> bool:
        """Type is interface-kind (contract only)."""
        ...

    @property
    def visibility(self) -> Visibility:
        """PUBLIC / PROTECTED / PRIVATE."""
        ...

    def declared_interfaces(self) -> Sequence[TypeDescriptor]:
        """Interfaces declared directly on this type.

        For an interface: the interfaces it extends.
        """
        ...

    def superclass(self) -> TypeDescriptor | None:
        """Parent class. None = inheritance root."""
        ...
