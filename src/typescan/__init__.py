"""typescan - runtime discovery of classes and interface implementations in a package."""

__version__ = "0.1.0"

from typescan.application.services import TypeScanner
from typescan.domain.exceptions import ScanIOError, TypeScanError
from typescan.domain.model import JVM_CLASS, PYTHON_SOURCE, ScanConfig, ScanReport, UnitFormat
from typescan.presentation.api import (
    get_all_classes,
    get_concrete_classes_with_interface,
    implements_interface,
)

__all__ = [
    "JVM_CLASS",
    "PYTHON_SOURCE",
    "ScanConfig",
    "ScanIOError",
    "ScanReport",
    "TypeScanError",
    "TypeScanner",
    "UnitFormat",
    "__version__",
    "get_all_classes",
    "get_concrete_classes_with_interface",
    "implements_interface",
]
