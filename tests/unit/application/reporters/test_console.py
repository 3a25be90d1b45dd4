"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() sections
- Type table ordering and truncation
"""

import re
from pathlib import Path

import pytest

from typescan.application.reporters.console import ConsoleConfig, ConsoleReporter
from typescan.domain.model.namespace import Namespace
from typescan.domain.model.resolution import Unresolved
from typescan.domain.model.scan_report import ScanReport
from tests.factories import make_candidate, make_class, make_interface, make_root

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text: str) -> str:
    """Strip terminal styling."""
    return _ANSI.sub("", text)


def make_report(
    types: tuple = (),
    unresolved_reasons: dict[str, str] | None = None,
) -> ScanReport:
    """ScanReport for com.acme.plugins with one filesystem root."""
    unresolved_reasons = unresolved_reasons or {}
    candidates = {make_candidate(t.name) for t in types}
    failures = tuple(
        Unresolved(candidate=make_candidate(fqn, entry=f"/classes/{fqn}.class"), reason=reason)
        for fqn, reason in unresolved_reasons.items()
    )
    candidates.update(f.candidate for f in failures)
    return ScanReport(
        namespace=Namespace("com.acme.plugins"),
        roots=(make_root(Path("/classes/com/acme/plugins")),),
        candidates=frozenset(candidates),
        types=frozenset(types),
        unresolved=failures,
    )


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.show_roots is True
        assert config.show_types is True
        assert config.show_unresolved is True
        assert config.max_types is None
        assert config.width == 120

    def test_negative_max_types(self) -> None:
        with pytest.raises(ValueError, match="max_types must be >= 0"):
            ConsoleConfig(max_types=-1)

    def test_narrow_width(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 40"):
            ConsoleConfig(width=20)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        """report() contains TYPE SCAN header with namespace."""
        output = plain(ConsoleReporter().report(make_report()))
        assert "TYPE SCAN" in output
        assert "com.acme.plugins" in output

    def test_report_contains_counts(self) -> None:
        output = plain(ConsoleReporter().report(make_report(types=(make_class("com.acme.plugins.Foo"),))))
        assert "Roots: 1" in output
        assert "Types: 1" in output
        assert "Unresolved: 0" in output

    def test_empty_report(self) -> None:
        """Report without namespace renders header only."""
        output = plain(ConsoleReporter().report(ScanReport.empty()))
        assert "TYPE SCAN -" in output
        assert "ROOTS" not in output
        assert "Discovered types" not in output

    def test_roots_section(self) -> None:
        output = plain(ConsoleReporter().report(make_report()))
        assert "ROOTS" in output
        assert "filesystem:" in output

    def test_types_table_with_kinds(self) -> None:
        plugin = make_interface("com.acme.plugins.Plugin")
        types = (
            plugin,
            make_class("com.acme.plugins.Base", plugin, is_abstract=True),
            make_class("com.acme.plugins.Foo", plugin),
        )
        output = plain(ConsoleReporter().report(make_report(types=types)))

        assert "Discovered types" in output
        assert "interface" in output
        assert "abstract" in output
        assert output.index("com.acme.plugins.Base") < output.index("com.acme.plugins.Foo")

    def test_max_types_truncates(self) -> None:
        types = tuple(make_class(f"com.acme.plugins.T{i}") for i in range(5))
        reporter = ConsoleReporter(ConsoleConfig(max_types=2))

        output = plain(reporter.report(make_report(types=types)))

        assert "com.acme.plugins.T0" in output
        assert "com.acme.plugins.T4" not in output
        assert "... 3 more" in output

    def test_unresolved_section(self) -> None:
        report = make_report(unresolved_reasons={"com.acme.plugins.Broken": "missing [dependency]"})

        output = plain(ConsoleReporter().report(report))

        assert "UNRESOLVED" in output
        assert "com.acme.plugins.Broken" in output
        assert "missing [dependency]" in output
        assert "Broken.class" in output

    def test_sections_can_be_hidden(self) -> None:
        report = make_report(
            types=(make_class("com.acme.plugins.Foo"),),
            unresolved_reasons={"com.acme.plugins.Broken": "boom"},
        )
        config = ConsoleConfig(show_roots=False, show_types=False, show_unresolved=False)

        output = plain(ConsoleReporter(config).report(report))

        assert "ROOTS" not in output
        assert "Discovered types" not in output
        assert "UNRESOLVED" not in output
