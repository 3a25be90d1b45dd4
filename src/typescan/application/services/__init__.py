"""Application services for type discovery.

TypeScanner is the main facade for running discovery.
"""

from typescan.application.services.scanner import TypeScanner

__all__ = [
    "TypeScanner",
]
