"""Main facade for type discovery.

TypeScanner runs the whole pipeline:

    enumerate_roots -> extract_all -> resolve -> (interface filter)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from typescan.application.discovery.names import extract_all
from typescan.application.discovery.roots import enumerate_roots, location_to_path
from typescan.application.matching.predicates import implements
from typescan.domain.model.configuration import ScanConfig
from typescan.domain.model.namespace import Namespace
from typescan.domain.model.resolution import Resolved, Unresolved
from typescan.domain.model.scan_report import ScanReport
from typescan.domain.predicates.type_predicates import all_of, is_concrete, is_private
from typescan.infrastructure.adapters.python_resolver import PythonTypeResolver
from typescan.infrastructure.lookup_path import resolve_lookup_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typescan.domain.model.candidate_name import CandidateName
    from typescan.domain.ports.type_descriptor import TypeDescriptor
    from typescan.domain.ports.type_resolver import TypeResolverPort

logger = logging.getLogger(__name__)


class TypeScanner:
    """Main facade for type discovery.

    Stateless between calls: every call enumerates the lookup path again,
    nothing is cached.

    Example:
        scanner = TypeScanner(ScanConfig(lookup_path=("plugins.zip",)))
        for plugin in scanner.get_concrete_classes_with_interface("acme.plugins", plugin_iface):
            print(plugin.name)
    """

    def __init__(
        self,
        config: ScanConfig | None = None,
        *,
        resolver: TypeResolverPort | None = None,
    ) -> None:
        """Initialize scanner with dependencies.

        Args:
            config: Scan configuration. Uses defaults if None.
            resolver: Name resolver. None = import Python modules found on
                the configured lookup path.
        """
        self._config = config or ScanConfig()
        self._resolver = resolver

    @classmethod
    def with_defaults(cls) -> Self:
        """Create scanner over the ambient sys.path with Python units."""
        return cls(ScanConfig())

    @property
    def config(self) -> ScanConfig:
        """Active configuration."""
        return self._config

    def scan(self, namespace: str | Namespace | None) -> ScanReport:
        """Discover all types under namespace with diagnostics.

        Args:
            namespace: Dotted package name. None/empty = empty report.

        Returns:
            ScanReport with roots, candidates, types and failures

        Raises:
            ScanIOError: If a root or archive cannot be read
        """
        ns = Namespace.parse(namespace)
        if ns is None:
            return ScanReport.empty()

        lookup_path = resolve_lookup_path(self._config)
        roots = enumerate_roots(ns, lookup_path)
        candidates = extract_all(roots, self._config.unit_format)

        resolver = self._resolver or self._default_resolver(lookup_path)
        types, unresolved = self._resolve_all(candidates, resolver)

        logger.info(
            "scanned %s: %d roots, %d candidates, %d types, %d unresolved",
            ns,
            len(roots),
            len(candidates),
            len(types),
            len(unresolved),
        )
        return ScanReport(
            namespace=ns,
            roots=roots,
            candidates=candidates,
            types=types,
            unresolved=unresolved,
        )

    def get_all_classes(self, namespace: str | Namespace | None) -> frozenset[TypeDescriptor]:
        """Discover all types under namespace.

        Returns:
            DiscoverySet. Empty for None/empty namespace.

        Raises:
            ScanIOError: If a root or archive cannot be read
        """
        return self.scan(namespace).types

    def get_concrete_classes_with_interface(
        self,
        namespace: str | Namespace | None,
        interface: TypeDescriptor | None,
    ) -> frozenset[TypeDescriptor]:
        """Discover concrete types under namespace implementing interface.

        Args:
            namespace: Dotted package name
            interface: Target interface. Not interface-kind = empty result.

        Returns:
            Concrete (not abstract, not interface) implementing types

        Raises:
            ScanIOError: If a root or archive cannot be read
        """
        if interface is None or not interface.is_interface:
            logger.debug("target %s is not interface-kind, nothing matches", interface)
            return frozenset()

        keep = all_of(is_concrete(), implements(interface))
        return frozenset(t for t in self.get_all_classes(namespace) if keep(t))

    def _default_resolver(self, lookup_path: tuple[str, ...]) -> TypeResolverPort:
        if self._config.uses_ambient_path:
            return PythonTypeResolver()
        # importers take filesystem paths, not file: URLs
        paths = (location_to_path(location) for location in lookup_path)
        return PythonTypeResolver(search_path=[str(path) for path in paths if path is not None])

    def _resolve_all(
        self,
        candidates: Iterable[CandidateName],
        resolver: TypeResolverPort,
    ) -> tuple[frozenset[TypeDescriptor], tuple[Unresolved, ...]]:
        """Resolve candidates; failures are collected, never raised."""
        hidden = is_private()
        types: set[TypeDescriptor] = set()
        unresolved: list[Unresolved] = []

        # sorted: parents import before children, deterministic logs
        for candidate in sorted(candidates, key=lambda c: c.fqn):
            match resolver.resolve(candidate):
                case Resolved(types=found):
                    types.update(t for t in found if self._config.include_private or not hidden(t))
                case Unresolved() as failure:
                    logger.warning("unresolvable %s: %s", candidate, failure.reason)
                    unresolved.append(failure)

        return frozenset(types), tuple(unresolved)
