"""Compiled-unit file format."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UnitFormat:
    """How loadable units look inside a resource root.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        suffix: File suffix of one unit (".py", ".class")
        nested_separator: Separator between outer and nested type names ("$")
        package_stem: Stem naming the enclosing package itself ("__init__").
            None = format has no package units.
        skipped_stems: Stems never treated as units ("__main__")
        skipped_dirs: Directory names never descended into ("__pycache__")
    """

    suffix: str
    nested_separator: str = "$"
    package_stem: str | None = None
    skipped_stems: frozenset[str] = frozenset()
    skipped_dirs: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.suffix.startswith(".") or len(self.suffix) < 2:
            raise ValueError(f"suffix must look like '.ext', got '{self.suffix}'")
        if len(self.nested_separator) != 1:
            raise ValueError(
                f"nested_separator must be one character, got '{self.nested_separator}'"
            )
        if self.nested_separator in "./\\":
            raise ValueError("nested_separator must not be a path separator or '.'")
        if self.package_stem is not None and not self.package_stem:
            raise ValueError("package_stem must be None or non-empty")


# Python source modules: a/b/c.py -> a.b.c, a/b/__init__.py -> a.b
PYTHON_SOURCE = UnitFormat(
    suffix=".py",
    package_stem="__init__",
    skipped_stems=frozenset({"__main__"}),
    skipped_dirs=frozenset({"__pycache__"}),
)

# JVM-style class files: a/b/Outer$Inner.class -> a.b.Outer.Inner
JVM_CLASS = UnitFormat(suffix=".class")
