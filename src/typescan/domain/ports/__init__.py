"""Domain ports (interfaces/protocols)."""

from typescan.domain.ports.type_descriptor import TypeDescriptor
from typescan.domain.ports.type_resolver import TypeResolverPort

__all__ = [
    "TypeDescriptor",
    "TypeResolverPort",
]
