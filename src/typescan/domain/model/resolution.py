"""Resolution result: name -> type descriptors, or a reason why not.

Narrow result type instead of exceptions: the discovery loop has exactly
one recovery path (skip Unresolved) and never catches unrelated faults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from typescan.domain.model.candidate_name import CandidateName
    from typescan.domain.ports.type_descriptor import TypeDescriptor


@dataclass(frozen=True, slots=True)
class Resolved:
    """Candidate resolved to one or more live types.

    A unit may declare several types (Python module with many classes);
    a JVM-style unit declares exactly one.

    Attributes:
        candidate: Name that was resolved
        types: Descriptors the unit declares (may be empty)
    """

    candidate: CandidateName
    types: tuple[TypeDescriptor, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.candidate is None:
            raise TypeError("candidate must not be None")


@dataclass(frozen=True, slots=True)
class Unresolved:
    """Candidate could not be resolved (missing dependency, load error).

    Attributes:
        candidate: Name that failed
        reason: Why resolution failed (exception type and message)
    """

    candidate: CandidateName
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.candidate is None:
            raise TypeError("candidate must not be None")
        if not self.reason:
            raise ValueError("reason must not be empty")

    def __str__(self) -> str:
        """Format as candidate: reason."""
        return f"{self.candidate}: {self.reason}"


Resolution: TypeAlias = Resolved | Unresolved
