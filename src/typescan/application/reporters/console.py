"""Console reporter: ScanReport → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from typescan.domain.model.scan_report import ScanReport
    from typescan.domain.ports.type_descriptor import TypeDescriptor


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        show_roots: Show scanned roots section.
        show_types: Show discovered types table.
        show_unresolved: Show unresolved candidates with reasons.
        max_types: Max types to display. None = unlimited.
        width: Console width in characters.
    """

    show_roots: bool = True
    show_types: bool = True
    show_unresolved: bool = True
    max_types: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_types is not None and self.max_types < 0:
            raise ValueError(f"max_types must be >= 0, got {self.max_types}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: ScanReport) -> str:
        """Format scan report as rich formatted string.

        Args:
            result: Scan report to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)

        if self._config.show_roots and result.roots:
            self._render_roots(console, result)

        if self._config.show_types and result.types:
            self._render_types(console, result)

        if self._config.show_unresolved and result.unresolved:
            self._render_unresolved(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: ScanReport) -> None:
        """Render header with summary."""
        console.print()
        console.rule(f"[bold]TYPE SCAN[/bold] {result.namespace or '-'}")
        console.print()
        console.print(
            f"[bold]Roots:[/bold] {len(result.roots)}  "
            f"[bold]Candidates:[/bold] {len(result.candidates)}  "
            f"[bold]Types:[/bold] {result.type_count}  "
            f"[bold]Unresolved:[/bold] {len(result.unresolved)}"
        )
        console.print()

    def _render_roots(self, console: Console, result: ScanReport) -> None:
        """Render scanned roots."""
        console.print("[bold]ROOTS[/bold]")
        for root in result.roots:
            console.print(f"  {root}", markup=False)
        console.print()

    def _render_types(self, console: Console, result: ScanReport) -> None:
        """Render discovered types table, sorted by name."""
        ordered = sorted(result.types, key=lambda t: t.name)
        if self._config.max_types is not None:
            ordered = ordered[: self._config.max_types]

        table = Table(title="Discovered types")
        table.add_column("Type")
        table.add_column("Kind")
        for type_ in ordered:
            table.add_row(type_.name, _kind_of(type_))
        console.print(table)

        hidden = result.type_count - len(ordered)
        if hidden:
            console.print(f"[dim]... {hidden} more[/dim]")
        console.print()

    def _render_unresolved(self, console: Console, result: ScanReport) -> None:
        """Render candidates that failed resolution."""
        console.print(f"[bold red]UNRESOLVED[/bold red] ({len(result.unresolved)})")
        console.print()
        for failure in result.unresolved:
            console.print(f"  [yellow]{failure.candidate.fqn}[/yellow]")
            if failure.candidate.entry:
                console.print(f"    entry:  {failure.candidate.entry}", markup=False)
            console.print(f"    reason: {failure.reason}", markup=False)
        console.print()


def _kind_of(type_: TypeDescriptor) -> str:
    """Short kind label: interface / abstract / class."""
    if type_.is_interface:
        return "interface"
    if type_.is_abstract:
        return "abstract"
    return "class"
