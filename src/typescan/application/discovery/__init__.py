"""Discovery layer for type scanning.

Functions to discover what a namespace exposes:
- Resource roots (directories, zip archives) from the lookup path
- Candidate type names from root entries
"""

from typescan.application.discovery.names import (
    derive_candidate,
    extract_all,
    extract_names,
    is_anonymous,
)
from typescan.application.discovery.roots import enumerate_roots, location_to_path

__all__ = [
    "derive_candidate",
    "enumerate_roots",
    "extract_all",
    "extract_names",
    "is_anonymous",
    "location_to_path",
]
