"""Domain exceptions: all public errors of typescan.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.

Unresolvable names are NOT exceptions. Resolution returns an Unresolved
variant and discovery skips the candidate (see domain/model/resolution.py).
"""


class TypeScanError(Exception):
    """Base for all typescan error exceptions.

    Allows: except TypeScanError to catch all library errors.
    """


class ScanIOError(TypeScanError, OSError):
    """Lookup-path root or archive could not be read.

    Inherits OSError for semantic correctness (transport/filesystem failure).
    Inherits TypeScanError for unified exception handling.
    Raised fail-fast: partial results gathered before the failure are dropped.

    Attributes:
        location: Root location (archive or directory) that failed.
        reason: Error description.
    """

    def __init__(self, *, location: str, reason: str) -> None:
        """Initialize with failing location and reason."""
        if not location:
            raise ValueError("location must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.location = location
        self.reason = reason
        super().__init__(f"Cannot read {location}: {reason}")
