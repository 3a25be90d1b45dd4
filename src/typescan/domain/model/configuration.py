"""Scan configuration.

Explicit replacement for the ambient lookup path: the caller passes the
roots to search. None = use the ambient environment (sys.path) at call time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from typescan.domain.model.unit_format import PYTHON_SOURCE, UnitFormat


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Discovery configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        lookup_path: Root locations to search (paths or file: URLs, zip
            archives allowed). None = ambient sys.path at call time.
        unit_format: Layout of loadable units inside roots.
        include_private: Keep PRIVATE (__Name) types in results.
        extras: Arbitrary user data for custom resolvers.
    """

    lookup_path: tuple[str, ...] | None = None
    unit_format: UnitFormat = PYTHON_SOURCE
    include_private: bool = False
    extras: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.unit_format is None:
            raise TypeError("unit_format must not be None")

        if self.lookup_path is not None:
            if isinstance(self.lookup_path, str):
                raise TypeError("lookup_path must be a tuple of locations, not a string")
            for location in self.lookup_path:
                if not isinstance(location, str):
                    raise TypeError(
                        f"lookup_path entries must be str, got {type(location).__name__}"
                    )

    @property
    def uses_ambient_path(self) -> bool:
        """Check if lookup path comes from the environment."""
        return self.lookup_path is None
