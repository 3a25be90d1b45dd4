"""Interface matching over resolved type descriptors."""

from typescan.application.matching.interfaces import implements_interface, is_interface_equal
from typescan.application.matching.predicates import implements

__all__ = [
    "implements",
    "implements_interface",
    "is_interface_equal",
]
