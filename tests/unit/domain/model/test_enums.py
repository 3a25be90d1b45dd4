"""Tests for domain/model/enums.py."""

import pytest

from typescan.domain.model.enums import RootKind, Visibility


class TestVisibilityOf:
    """Tests for Visibility.of()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Plugin", Visibility.PUBLIC),
            ("_Helper", Visibility.PROTECTED),
            ("__Hidden", Visibility.PRIVATE),
            ("__dunder__", Visibility.PROTECTED),
        ],
    )
    def test_classifies_by_prefix(self, name: str, expected: Visibility) -> None:
        assert Visibility.of(name) is expected


class TestRootKind:
    """Tests for RootKind."""

    def test_values(self) -> None:
        assert RootKind.ARCHIVE.value == "archive"
        assert RootKind.FILESYSTEM.value == "filesystem"
