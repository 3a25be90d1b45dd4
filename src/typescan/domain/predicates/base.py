"""Predicate type aliases."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typescan.domain.ports.type_descriptor import TypeDescriptor

# Type alias for predicate functions
TypePredicate = Callable[["TypeDescriptor"], bool]
