"""Domain model entities."""

from typescan.domain.model.candidate_name import CandidateName
from typescan.domain.model.configuration import ScanConfig
from typescan.domain.model.enums import RootKind, Visibility
from typescan.domain.model.namespace import Namespace
from typescan.domain.model.resolution import Resolution, Resolved, Unresolved
from typescan.domain.model.resource_root import ResourceRoot
from typescan.domain.model.scan_report import ScanReport
from typescan.domain.model.unit_format import JVM_CLASS, PYTHON_SOURCE, UnitFormat

__all__ = [
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
    # Resolution
    "Resolution",
    "Resolved",
    "Unresolved",
    # Results
    "ScanReport",
    # Configuration
    "ScanConfig",
]
