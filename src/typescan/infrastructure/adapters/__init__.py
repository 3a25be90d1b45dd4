"""Python host adapters."""

from typescan.infrastructure.adapters.python_resolver import PythonTypeResolver, declared_classes
from typescan.infrastructure.adapters.python_type import PythonType, is_interface_class

__all__ = [
    "PythonType",
    "PythonTypeResolver",
    "declared_classes",
    "is_interface_class",
]
