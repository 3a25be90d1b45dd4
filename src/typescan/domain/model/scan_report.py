"""Scan report: everything one discovery call saw."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typescan.domain.model.candidate_name import CandidateName
    from typescan.domain.model.namespace import Namespace
    from typescan.domain.model.resolution import Unresolved
    from typescan.domain.model.resource_root import ResourceRoot
    from typescan.domain.ports.type_descriptor import TypeDescriptor


@dataclass(frozen=True, slots=True)
class ScanReport:
    """Result of one discovery pass with diagnostics.

    Data Completeness: unresolved candidates are kept with their reasons,
    even though they never reach the result set.

    Attributes:
        namespace: Searched namespace (None = nothing was searched)
        roots: Roots the namespace was found under
        candidates: Names derived from all roots (deduplicated)
        types: Discovered types (the DiscoverySet)
        unresolved: Candidates that failed resolution
    """

    namespace: Namespace | None
    roots: tuple[ResourceRoot, ...]
    candidates: frozenset[CandidateName]
    types: frozenset[TypeDescriptor]
    unresolved: tuple[Unresolved, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.namespace is None and (self.roots or self.candidates or self.types):
            raise ValueError("report without namespace must be empty")

        failed = {u.candidate for u in self.unresolved}
        unknown = failed - self.candidates
        if unknown:
            names = ", ".join(sorted(c.fqn for c in unknown))
            raise ValueError(f"unresolved candidates not in candidates: {names}")

    @classmethod
    def empty(cls, namespace: Namespace | None = None) -> ScanReport:
        """Create report for a scan that found nothing."""
        return cls(namespace=namespace, roots=(), candidates=frozenset(), types=frozenset())

    @property
    def type_count(self) -> int:
        """Number of discovered types."""
        return len(self.types)

    @property
    def has_failures(self) -> bool:
        """Check if any candidate failed resolution."""
        return bool(self.unresolved)
