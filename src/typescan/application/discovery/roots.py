"""Resource root enumeration from lookup-path locations."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import unquote, urlsplit

from typescan.domain.exceptions import ScanIOError
from typescan.domain.model.enums import RootKind
from typescan.domain.model.namespace import Namespace
from typescan.domain.model.resource_root import ResourceRoot

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_FILE_SCHEME = "file"


def enumerate_roots(
    namespace: str | Namespace | None,
    lookup_path: Iterable[str],
) -> tuple[ResourceRoot, ...]:
    """Find every root on lookup_path that exposes namespace.

    Lookup-path locations are plain paths or file: URLs. Directories yield
    FILESYSTEM roots, zip archives (or paths inside one) yield ARCHIVE
    roots. Other URL schemes and missing locations are skipped.

    Args:
        namespace: Dotted package name. None/empty = search nothing.
        lookup_path: Locations to search, in priority order

    Returns:
        Roots in lookup-path order, without duplicates

    Raises:
        ScanIOError: If a present archive cannot be read

    Example:
        >>> enumerate_roots("myapp.plugins", ["src", "vendor/libs.zip"])
        (ResourceRoot(kind=<RootKind.FILESYSTEM...>, ...), ...)
    """
    ns = Namespace.parse(namespace)
    if ns is None:
        return ()

    roots: list[ResourceRoot] = []
    for location in lookup_path:
        path = location_to_path(location)
        if path is None:
            continue

        root = _locate(path, ns)
        if root is None:
            continue

        if root in roots:
            logger.debug("duplicate root %s skipped", root)
            continue
        roots.append(root)

    return tuple(roots)


def location_to_path(location: str) -> Path | None:
    """Convert lookup-path location to canonical filesystem path.

    file: URLs are percent-decoded before any path operation.
    Empty location means the current directory (sys.path convention).
    Single-letter schemes are Windows drive letters, not URLs.

    Returns:
        Resolved path, or None if the scheme is not supported
    """
    if not location:
        return Path.cwd()

    parts = urlsplit(location)
    scheme = parts.scheme.lower()

    if scheme == _FILE_SCHEME:
        return Path(unquote(parts.path)).resolve()

    if len(scheme) > 1:
        logger.debug("unsupported scheme '%s' skipped: %s", scheme, location)
        return None

    return Path(location).resolve()


def _locate(path: Path, namespace: Namespace) -> ResourceRoot | None:
    """Build root for namespace under path, if it is there."""
    if path.is_dir():
        directory = path.joinpath(*namespace.segments)
        if not directory.is_dir():
            return None
        return ResourceRoot(kind=RootKind.FILESYSTEM, origin=directory, namespace=namespace)

    split = _split_archive(path)
    if split is None:
        logger.debug("location not found or not an archive: %s", path)
        return None

    archive, prefix = split
    root = ResourceRoot(kind=RootKind.ARCHIVE, origin=archive, namespace=namespace, prefix=prefix)
    if not _archive_has_entries(root):
        return None
    return root


def _split_archive(path: Path) -> tuple[Path, str] | None:
    """Split path into (zip archive, inner prefix).

    Handles both the archive itself ("libs.zip") and a directory inside
    it ("libs.zip/site"), the way zipimport accepts sys.path entries.
    """
    for candidate in (path, *path.parents):
        if candidate.is_file():
            if not zipfile.is_zipfile(candidate):
                return None
            inner = path.relative_to(candidate).as_posix()
            return candidate, "" if inner == "." else inner
        if candidate.exists():
            return None
    return None


def _archive_has_entries(root: ResourceRoot) -> bool:
    """Check if archive holds any entry under the namespace directory."""
    prefix = root.entry_prefix
    try:
        with zipfile.ZipFile(root.origin) as archive:
            return any(name.startswith(prefix) for name in archive.namelist())
    except (OSError, zipfile.BadZipFile) as e:
        raise ScanIOError(location=str(root.origin), reason=str(e)) from e
