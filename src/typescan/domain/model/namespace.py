"""Namespace value object."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Namespace:
    """Dot-delimited package name that discovery searches under.

    Attributes:
        name: Dotted name (e.g. "com.acme.plugins")
    """

    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("namespace must not be empty")
        if any(not segment for segment in self.name.split(".")):
            raise ValueError(f"namespace has empty segment: '{self.name}'")
        if "/" in self.name or "\\" in self.name:
            raise ValueError(f"namespace must be dotted, not a path: '{self.name}'")

    @classmethod
    def parse(cls, value: str | Namespace | None) -> Namespace | None:
        """Build namespace from user input.

        None, empty string or a malformed name ("a..b", "a/b") means
        "search nothing" and returns None instead of raising.
        """
        if value is None or isinstance(value, Namespace):
            return value
        if not value:
            return None
        try:
            return cls(value)
        except ValueError as e:
            logger.debug("malformed namespace searches nothing: %s", e)
            return None

    @property
    def segments(self) -> tuple[str, ...]:
        """Dotted name split into parts."""
        return tuple(self.name.split("."))

    @property
    def path_fragment(self) -> str:
        """Slash-delimited form used for resource lookup (a/b/c)."""
        return self.name.replace(".", "/")

    def contains(self, fqn: str) -> bool:
        """Check if fqn is this namespace or lives below it."""
        return fqn == self.name or fqn.startswith(f"{self.name}.")

    def __str__(self) -> str:
        """Format as dotted name."""
        return self.name
