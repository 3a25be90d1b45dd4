"""Candidate type name derived from a resource entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typescan.domain.model.resource_root import ResourceRoot


@dataclass(frozen=True, slots=True)
class CandidateName:
    """Fully qualified name derived from an archive entry or file path.

    Equality is by fqn only: the same unit reachable through two roots
    is one candidate.

    Attributes:
        fqn: Fully qualified dotted name (e.g. "com.acme.plugins.FooPlugin")
        entry: Originating archive entry or file path, for diagnostics
        root: Root the entry was found under (None for ad-hoc candidates)
    """

    fqn: str
    entry: str = ""
    root: ResourceRoot | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.fqn:
            raise ValueError("fqn must not be empty")
        for segment in self.fqn.split("."):
            if not segment.isidentifier():
                raise ValueError(f"fqn segment '{segment}' is not an identifier: '{self.fqn}'")

    def __eq__(self, other: object) -> bool:
        """Compare by fqn."""
        if not isinstance(other, CandidateName):
            return NotImplemented
        return self.fqn == other.fqn

    def __hash__(self) -> int:
        """Hash by fqn."""
        return hash(self.fqn)

    @property
    def simple_name(self) -> str:
        """Last dotted segment."""
        return self.fqn.rsplit(".", 1)[-1]

    def __str__(self) -> str:
        """Format as fqn (entry)."""
        if self.entry:
            return f"{self.fqn} ({self.entry})"
        return self.fqn
