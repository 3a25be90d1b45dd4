"""Candidate name -> live Python classes via importlib.

A candidate names either a module (what ".py" units derive to) or a class
inside one ("pkg.mod.Outer.Inner"). Modules resolve to the classes they
declare themselves; re-exported classes belong to their defining module.

Import runs arbitrary module code, so every Exception raised while loading
becomes an Unresolved result. KeyboardInterrupt/SystemExit propagate.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from importlib.machinery import PathFinder
from types import ModuleType
from typing import TYPE_CHECKING

from typescan.domain.model.resolution import Resolved, Unresolved
from typescan.domain.ports.type_resolver import TypeResolverPort
from typescan.infrastructure.adapters.python_type import PythonType

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from typescan.domain.model.candidate_name import CandidateName
    from typescan.domain.model.resolution import Resolution

logger = logging.getLogger(__name__)


class PythonTypeResolver(TypeResolverPort):
    """Resolve candidates by importing them.

    Top-level packages missing from sys.modules are located on search_path
    with PathFinder (zip archives included through the standard path
    hooks), so explicit lookup paths work without touching sys.path.
    """

    def __init__(self, search_path: Sequence[str] | None = None) -> None:
        """Initialize resolver.

        Args:
            search_path: Locations to find top-level packages on.
                None = rely on sys.path (plain importlib behaviour).
        """
        self._search_path = list(search_path) if search_path is not None else None

    def resolve(self, candidate: CandidateName) -> Resolution:
        """Import candidate and describe the classes it declares."""
        try:
            target = self._load(candidate.fqn)
        except Exception as e:  # noqa: BLE001 - import runs arbitrary module code
            return Unresolved(candidate=candidate, reason=f"{type(e).__name__}: {e}")

        if isinstance(target, ModuleType):
            types = tuple(PythonType(cls) for cls in declared_classes(target))
            return Resolved(candidate=candidate, types=types)

        if isinstance(target, type):
            return Resolved(candidate=candidate, types=(PythonType(target),))

        return Unresolved(
            candidate=candidate,
            reason=f"not a module or class: {type(target).__name__}",
        )

    def _load(self, fqn: str) -> object:
        """Import longest module prefix of fqn, then walk attributes."""
        parts = fqn.split(".")
        self._ensure_top_level(parts[0])

        for split in range(len(parts), 0, -1):
            module_name = ".".join(parts[:split])
            try:
                target: object = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                if not _names_prefix(e.name, module_name):
                    raise  # a dependency of the module is missing
                continue

            for attribute in parts[split:]:
                target = getattr(target, attribute)
            return target

        raise ModuleNotFoundError(f"No module named '{fqn}'", name=fqn)

    def _ensure_top_level(self, name: str) -> None:
        """Load top-level package from search_path if not imported yet."""
        if self._search_path is None or name in sys.modules:
            return

        spec = PathFinder.find_spec(name, self._search_path)
        if spec is None:
            return  # import_module reports the miss

        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        try:
            if spec.loader is not None:
                spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(name, None)
            raise
        logger.debug("loaded %s from %s", name, spec.origin or spec.submodule_search_locations)


def declared_classes(module: ModuleType) -> tuple[type, ...]:
    """Classes defined in module: top-level ones and their named nested classes.

    Aliases of the same class are reported once. Classes defined inside
    functions (<locals>) are unreachable and never reported.
    """
    found: dict[int, type] = {}
    for value in vars(module).values():
        if _is_top_level_class(value, module.__name__):
            for cls in _with_nested(value):
                found.setdefault(id(cls), cls)
    return tuple(found.values())


def _is_top_level_class(value: object, module_name: str) -> bool:
    return (
        isinstance(value, type)
        and value.__module__ == module_name
        and value.__qualname__ == value.__name__
    )


def _with_nested(cls: type) -> Iterator[type]:
    """Yield cls and, depth-first, classes nested in its body."""
    yield cls
    for value in vars(cls).values():
        if (
            isinstance(value, type)
            and value.__module__ == cls.__module__
            and value.__qualname__ == f"{cls.__qualname__}.{value.__name__}"
        ):
            yield from _with_nested(value)


def _names_prefix(missing: str | None, module_name: str) -> bool:
    """Check if the missing module is module_name itself or one of its parents."""
    if missing is None:
        return False
    return module_name == missing or module_name.startswith(f"{missing}.")
