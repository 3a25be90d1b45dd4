"""typescan domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, collections.abc, logging
"""

from typescan.domain.exceptions import ScanIOError, TypeScanError
from typescan.domain.model import (
    JVM_CLASS,
    PYTHON_SOURCE,
    CandidateName,
    Namespace,
    Resolved,
    ResourceRoot,
    RootKind,
    ScanConfig,
    ScanReport,
    UnitFormat,
    Unresolved,
    Visibility,
)
from typescan.domain.ports import TypeDescriptor, TypeResolverPort

__all__ = [
    # Exceptions
    "TypeScanError",
    "ScanIOError",
    # Enums
    "RootKind",
    "Visibility",
    # Value objects
    "Namespace",
    "UnitFormat",
    "PYTHON_SOURCE",
    "JVM_CLASS",
    "ResourceRoot",
    "CandidateName",
    "Resolved",
    "Unresolved",
    "ScanReport",
    "ScanConfig",
    # Ports
    "TypeDescriptor",
    "TypeResolverPort",
]
