"""Type resolver port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typescan.domain.model.candidate_name import CandidateName
    from typescan.domain.model.resolution import Resolution


class TypeResolverPort(ABC):
    """Port for turning candidate names into live type descriptors.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def resolve(self, candidate: CandidateName) -> Resolution:
        """Load the unit named by candidate.

        Args:
            candidate: Name derived from a resource entry

        Returns:
            Resolved with the declared types, or Unresolved with a reason.
            Load-time faults MUST be returned as Unresolved, never raised.
        """
        ...
