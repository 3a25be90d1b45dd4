"""TypeDescriptor adapter over live Python classes.

Python has no interface keyword, so interface-kind is decided by shape:

- typing.Protocol classes are interfaces.
- An ABC is an interface when every method it defines itself is abstract,
  all its bases are interfaces (or object/ABC/Protocol/Generic), and it
  either lists ABC directly or still has abstract methods.

Anything else is a class. Its superclass is the first direct base that is
not an interface; every other direct base is reported as declared, so
mixins reached through multiple inheritance are still walked.
"""

from __future__ import annotations

import inspect
from abc import ABC, ABCMeta
from dataclasses import dataclass
from typing import Generic, Protocol

from typescan.domain.model.enums import Visibility

# Bases that carry no contract of their own
_ROOTS: frozenset[type] = frozenset({object, ABC, Protocol, Generic})  # type: ignore[arg-type]

# Members an ABC gets for free
_IGNORED_MEMBERS = frozenset({"_abc_impl"})


@dataclass(frozen=True, slots=True, eq=False)
class PythonType:
    """Live Python class seen through the TypeDescriptor contract.

    Equality is class identity.

    Attributes:
        cls: Wrapped class
    """

    cls: type

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.cls, type):
            raise TypeError(f"cls must be a class, got {type(self.cls).__name__}")

    def __eq__(self, other: object) -> bool:
        """Compare by wrapped class identity."""
        if not isinstance(other, PythonType):
            return NotImplemented
        return self.cls is other.cls

    def __hash__(self) -> int:
        """Hash by wrapped class identity."""
        return id(self.cls)

    @property
    def name(self) -> str:
        """Fully qualified name (module.Qualname)."""
        return f"{self.cls.__module__}.{self.cls.__qualname__}"

    @property
    def is_abstract(self) -> bool:
        """Has unimplemented abstract methods."""
        return inspect.isabstract(self.cls)

    @property
    def is_interface(self) -> bool:
        """Protocol or pure-abstract ABC."""
        return is_interface_class(self.cls)

    @property
    def visibility(self) -> Visibility:
        """Visibility by class name convention."""
        return Visibility.of(self.cls.__name__)

    def declared_interfaces(self) -> tuple[PythonType, ...]:
        """Direct bases except the superclass and contract-free roots."""
        parent = _superclass_of(self.cls)
        return tuple(
            PythonType(base)
            for base in self.cls.__bases__
            if base is not parent and base not in _ROOTS
        )

    def superclass(self) -> PythonType | None:
        """First direct base that is not an interface. None = root."""
        parent = _superclass_of(self.cls)
        if parent is None:
            return None
        return PythonType(parent)

    def __str__(self) -> str:
        """Format as fully qualified name."""
        return self.name


def is_interface_class(cls: type) -> bool:
    """Check if cls is interface-kind (see module docstring)."""
    if cls in _ROOTS:
        return False

    if cls.__dict__.get("_is_protocol", False):
        return True

    if not isinstance(cls, ABCMeta):
        return False

    abstract = getattr(cls, "__abstractmethods__", frozenset())
    for name, value in vars(cls).items():
        if _is_dunder(name) or name in _IGNORED_MEMBERS:
            continue
        if _is_method_like(value) and name not in abstract:
            return False

    if not all(base in _ROOTS or is_interface_class(base) for base in cls.__bases__):
        return False

    return ABC in cls.__bases__ or bool(abstract)


def _superclass_of(cls: type) -> type | None:
    """First direct base that is neither a root nor interface-kind."""
    for base in cls.__bases__:
        if base in _ROOTS:
            continue
        if not is_interface_class(base):
            return base
    return None


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_method_like(value: object) -> bool:
    return inspect.isfunction(value) or isinstance(
        value, (property, classmethod, staticmethod)
    )
