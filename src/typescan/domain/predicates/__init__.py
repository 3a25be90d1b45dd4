"""Type predicates for filtering discovered types."""

from typescan.domain.predicates.base import TypePredicate
from typescan.domain.predicates.type_predicates import (
    all_of,
    has_name_matching,
    is_concrete,
    is_interface,
    is_private,
)

__all__ = [
    "TypePredicate",
    "all_of",
    "has_name_matching",
    "is_concrete",
    "is_interface",
    "is_private",
]
