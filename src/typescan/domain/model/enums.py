"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto


class Visibility(Enum):
    """Type visibility by naming convention."""

    PUBLIC = auto()  # no underscore
    PROTECTED = auto()  # _Name
    PRIVATE = auto()  # __Name

    @classmethod
    def of(cls, name: str) -> Visibility:
        """Classify a simple (unqualified) name."""
        if name.startswith("__") and not name.endswith("__"):
            return cls.PRIVATE
        if name.startswith("_"):
            return cls.PROTECTED
        return cls.PUBLIC


class RootKind(Enum):
    """Container backing a resource root."""

    ARCHIVE = "archive"  # zip file (or path inside one)
    FILESYSTEM = "filesystem"  # plain directory
