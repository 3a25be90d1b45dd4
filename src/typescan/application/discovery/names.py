"""Candidate name extraction from resource roots.

Walks a root's entries, keeps compiled-unit files of the namespace and
derives a fully qualified name for each:

    com/acme/plugins/FooPlugin.class          -> com.acme.plugins.FooPlugin
    com/acme/plugins/FooPlugin$Helper.class   -> com.acme.plugins.FooPlugin.Helper
    com/acme/plugins/FooPlugin$1.class        -> excluded (anonymous)
    myapp/plugins/__init__.py                 -> myapp.plugins

Anonymous units are skipped one by one; the rest of the root is still
scanned (archives and directories behave the same).
"""

from __future__ import annotations

import logging
import os
import zipfile
from typing import TYPE_CHECKING

from typescan.domain.exceptions import ScanIOError
from typescan.domain.model.candidate_name import CandidateName
from typescan.domain.model.enums import RootKind
from typescan.domain.model.unit_format import PYTHON_SOURCE

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from typescan.domain.model.namespace import Namespace
    from typescan.domain.model.resource_root import ResourceRoot
    from typescan.domain.model.unit_format import UnitFormat

logger = logging.getLogger(__name__)

_ARCHIVE_SEPARATOR = "/"


def extract_names(
    root: ResourceRoot,
    unit_format: UnitFormat = PYTHON_SOURCE,
) -> frozenset[CandidateName]:
    """Derive candidate names for every unit under root.

    Args:
        root: Archive or filesystem root of one namespace
        unit_format: Layout of units (suffix, nested separator, ...)

    Returns:
        Frozenset of candidate names (anonymous units excluded)

    Raises:
        ScanIOError: If the archive or a directory cannot be read
    """
    match root.kind:
        case RootKind.ARCHIVE:
            return frozenset(_extract_from_archive(root, unit_format))
        case RootKind.FILESYSTEM:
            return frozenset(_extract_from_directory(root, unit_format))


def extract_all(
    roots: Iterable[ResourceRoot],
    unit_format: UnitFormat = PYTHON_SOURCE,
) -> frozenset[CandidateName]:
    """Union candidate names over roots.

    Same fqn under two roots is one candidate; the first root wins, so
    diagnostics point at the entry that shadows the others.
    """
    by_fqn: dict[str, CandidateName] = {}
    for root in roots:
        for candidate in sorted(extract_names(root, unit_format), key=lambda c: c.fqn):
            by_fqn.setdefault(candidate.fqn, candidate)
    return frozenset(by_fqn.values())


def derive_candidate(
    entry: str,
    namespace: Namespace,
    unit_format: UnitFormat = PYTHON_SOURCE,
    separator: str = _ARCHIVE_SEPARATOR,
) -> str | None:
    """Derive fully qualified name from one entry path.

    The path may carry any prefix before the namespace: the dotted form is
    truncated to start at the first segment-aligned occurrence of namespace.

    Args:
        entry: Archive entry name or file path
        namespace: Namespace the unit must belong to
        unit_format: Layout of units
        separator: Path separator used by entry ("/" for archives, os.sep)

    Returns:
        Fully qualified name, or None if entry is not a unit of namespace
        or is excluded (anonymous, skipped stem/dir, dotted stem, not an
        identifier)

    Example:
        >>> derive_candidate("com/acme/Foo$Bar.class", Namespace("com.acme"), JVM_CLASS)
        'com.acme.Foo.Bar'
    """
    if not entry.endswith(unit_format.suffix):
        return None

    stripped = entry[: -len(unit_format.suffix)]
    if "." in stripped.rsplit(separator, 1)[-1]:
        return None  # foo.bar.py is not importable as a module

    dotted = stripped.replace(separator, ".")
    segments = _truncate_to_namespace(dotted.split("."), namespace.segments)
    if segments is None:
        return None

    *packages, stem = segments
    if any(part in unit_format.skipped_dirs for part in packages):
        return None
    if stem in unit_format.skipped_stems:
        return None

    if is_anonymous(stem, unit_format.nested_separator):
        logger.debug("anonymous unit excluded: %s", entry)
        return None

    if stem == unit_format.package_stem:
        parts = packages
    else:
        parts = [*packages, *stem.split(unit_format.nested_separator)]

    if not parts or not all(part.isidentifier() for part in parts):
        return None

    return ".".join(parts)


def is_anonymous(stem: str, nested_separator: str = "$") -> bool:
    """Check if unit stem names a compiler-generated anonymous type.

    Anonymous discriminators are purely numeric: Foo$1, Foo$1$2,
    and types nested inside them (Foo$1$Helper) belong to the anonymous
    unit too. Named nested types (Foo$Helper) are not anonymous.
    """
    _, *nested = stem.split(nested_separator)
    return any(segment.isdigit() for segment in nested)


def _truncate_to_namespace(
    segments: list[str],
    namespace: tuple[str, ...],
) -> list[str] | None:
    """Drop leading segments before the first occurrence of namespace."""
    width = len(namespace)
    for start in range(len(segments) - width + 1):
        if tuple(segments[start : start + width]) == namespace:
            return segments[start:]
    return None


def _extract_from_archive(root: ResourceRoot, unit_format: UnitFormat) -> Iterator[CandidateName]:
    """Read archive entry names (handle closed on return) and derive names."""
    try:
        with zipfile.ZipFile(root.origin) as archive:
            entries = archive.namelist()
    except (OSError, zipfile.BadZipFile) as e:
        raise ScanIOError(location=str(root.origin), reason=str(e)) from e

    entry_prefix = root.entry_prefix
    skip = len(root.prefix) + 1 if root.prefix else 0

    for entry in entries:
        if not entry.startswith(entry_prefix):
            continue

        fqn = derive_candidate(entry[skip:], root.namespace, unit_format)
        if fqn is not None:
            yield CandidateName(fqn=fqn, entry=f"{root.origin}!{entry}", root=root)


def _extract_from_directory(
    root: ResourceRoot,
    unit_format: UnitFormat,
) -> Iterator[CandidateName]:
    """Walk namespace directory depth-first and derive names."""
    for path in _walk_units(root.origin, unit_format):
        # namespace-relative entry: truncation always hits the first segment
        relative = path.relative_to(root.origin).parts
        entry = os.sep.join((*root.namespace.segments, *relative))

        fqn = derive_candidate(entry, root.namespace, unit_format, separator=os.sep)
        if fqn is not None:
            yield CandidateName(fqn=fqn, entry=str(path), root=root)


def _walk_units(directory: Path, unit_format: UnitFormat) -> Iterator[Path]:
    """Yield unit files under directory, depth-first, skipped dirs pruned."""
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        raise ScanIOError(location=str(directory), reason=str(e)) from e

    for child in children:
        if child.is_dir():
            if child.name not in unit_format.skipped_dirs:
                yield from _walk_units(child, unit_format)
        elif child.name.endswith(unit_format.suffix):
            yield child
