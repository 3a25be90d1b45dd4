"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from typescan.domain.model.candidate_name import CandidateName
from typescan.domain.model.enums import RootKind, Visibility
from typescan.domain.model.namespace import Namespace
from typescan.domain.model.resolution import Resolved, Unresolved
from typescan.domain.model.resource_root import ResourceRoot
from typescan.domain.ports.type_resolver import TypeResolverPort

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from typescan.domain.model.resolution import Resolution


@dataclass(eq=False)
class FakeType:
    """Host-independent TypeDescriptor for matcher and scanner tests.

    Equality is object identity (like a host type registry).
    Mutable on purpose: tests wire cycles to simulate malformed metadata.
    """

    name: str
    is_abstract: bool = False
    is_interface: bool = False
    visibility: Visibility = Visibility.PUBLIC
    interfaces: list[FakeType] = field(default_factory=list)
    parent: FakeType | None = None

    def declared_interfaces(self) -> tuple[FakeType, ...]:
        return tuple(self.interfaces)

    def superclass(self) -> FakeType | None:
        return self.parent


def make_interface(name: str, *extends: FakeType) -> FakeType:
    """Create an interface type extending the given interfaces."""
    return FakeType(name=name, is_abstract=True, is_interface=True, interfaces=list(extends))


def make_class(
    name: str,
    *interfaces: FakeType,
    parent: FakeType | None = None,
    is_abstract: bool = False,
    visibility: Visibility = Visibility.PUBLIC,
) -> FakeType:
    """Create a class type declaring interfaces."""
    return FakeType(
        name=name,
        is_abstract=is_abstract,
        visibility=visibility,
        interfaces=list(interfaces),
        parent=parent,
    )


class FakeResolver(TypeResolverPort):
    """Resolver over a fixed fqn → types mapping.

    Names in failures resolve to Unresolved with the given reason.
    Names in neither mapping resolve to Unresolved("not found").
    Records every resolved fqn in calls.
    """

    def __init__(
        self,
        types: Mapping[str, FakeType | tuple[FakeType, ...]] | None = None,
        failures: Mapping[str, str] | None = None,
    ) -> None:
        self._types = dict(types or {})
        self._failures = dict(failures or {})
        self.calls: list[str] = []

    def resolve(self, candidate: CandidateName) -> Resolution:
        self.calls.append(candidate.fqn)
        if candidate.fqn in self._failures:
            return Unresolved(candidate=candidate, reason=self._failures[candidate.fqn])

        found = self._types.get(candidate.fqn)
        if found is None:
            return Unresolved(candidate=candidate, reason="not found")
        if isinstance(found, tuple):
            return Resolved(candidate=candidate, types=found)
        return Resolved(candidate=candidate, types=(found,))


def make_candidate(fqn: str, entry: str = "") -> CandidateName:
    """Create a CandidateName without a root."""
    return CandidateName(fqn=fqn, entry=entry)


def make_root(
    origin: Path,
    namespace: str = "com.acme.plugins",
    kind: RootKind = RootKind.FILESYSTEM,
    prefix: str = "",
) -> ResourceRoot:
    """Create a ResourceRoot."""
    return ResourceRoot(kind=kind, origin=origin, namespace=Namespace(namespace), prefix=prefix)


def write_tree(base: Path, files: Mapping[str, str]) -> Path:
    """Write files (relative posix path → content) under base.

    Returns:
        base
    """
    for relative, content in files.items():
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return base


def write_zip(archive: Path, entries: Mapping[str, str] | Iterable[str]) -> Path:
    """Write zip archive with given entries.

    Args:
        archive: Archive path to create
        entries: Entry name → content mapping, or entry names (empty content)

    Returns:
        archive
    """
    if not hasattr(entries, "items"):
        entries = dict.fromkeys(entries, "")

    archive.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(archive, "w") as zf:
        for name, content in entries.items():  # type: ignore[union-attr]
            zf.writestr(name, content)
    return archive
