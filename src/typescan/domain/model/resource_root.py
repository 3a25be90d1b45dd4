"""Resource root value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typescan.domain.model.enums import RootKind

if TYPE_CHECKING:
    from pathlib import Path

    from typescan.domain.model.namespace import Namespace


@dataclass(frozen=True, slots=True)
class ResourceRoot:
    """Located container exposing entries of a namespace.

    A root is only a description: archive handles are opened by whoever
    reads the entries and closed before that read returns.

    Attributes:
        kind: ARCHIVE or FILESYSTEM
        origin: Archive file (ARCHIVE) or namespace directory (FILESYSTEM)
        namespace: Namespace this root was located for
        prefix: Archive-internal directory the lookup entry points at
            ("" = archive top level). Always "" for FILESYSTEM roots.
    """

    kind: RootKind
    origin: Path
    namespace: Namespace
    prefix: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.origin is None:
            raise TypeError("origin must not be None")
        if self.namespace is None:
            raise TypeError("namespace must not be None")
        if self.kind is RootKind.FILESYSTEM and self.prefix:
            raise ValueError("prefix is only valid for ARCHIVE roots")
        if self.prefix.startswith("/") or self.prefix.endswith("/"):
            raise ValueError(f"prefix must not start or end with '/': '{self.prefix}'")

    @property
    def entry_prefix(self) -> str:
        """Archive entry prefix of the namespace directory (with trailing '/')."""
        fragment = self.namespace.path_fragment
        if self.prefix:
            return f"{self.prefix}/{fragment}/"
        return f"{fragment}/"

    def __str__(self) -> str:
        """Format as kind:origin[!prefix]."""
        if self.prefix:
            return f"{self.kind.value}:{self.origin}!{self.prefix}"
        return f"{self.kind.value}:{self.origin}"
