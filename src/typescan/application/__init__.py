"""Application layer for type discovery.

Components:
- discovery: Resource roots and candidate names
- matching: Interface conformance
- services: Main facade (TypeScanner)
- reporters: Output formatting (rich console)
"""

from typescan.application.discovery import (
    derive_candidate,
    enumerate_roots,
    extract_all,
    extract_names,
    is_anonymous,
)
from typescan.application.matching import implements, implements_interface, is_interface_equal
from typescan.application.reporters import ConsoleConfig, ConsoleReporter
from typescan.application.services import TypeScanner

__all__ = [
    # Discovery
    "derive_candidate",
    "enumerate_roots",
    "extract_all",
    "extract_names",
    "is_anonymous",
    # Matching
    "implements",
    "implements_interface",
    "is_interface_equal",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
    # Services
    "TypeScanner",
]
