"""Tests for domain/model/candidate_name.py."""

import pytest

from typescan.domain.model.candidate_name import CandidateName


class TestCandidateName:
    """Tests for CandidateName."""

    def test_simple_name(self) -> None:
        assert CandidateName("com.acme.FooPlugin").simple_name == "FooPlugin"

    def test_equality_ignores_entry(self) -> None:
        a = CandidateName("com.acme.Foo", entry="a.zip!com/acme/Foo.class")
        b = CandidateName("com.acme.Foo", entry="/classes/com/acme/Foo.class")
        assert a == b
        assert len({a, b}) == 1

    def test_str_includes_entry(self) -> None:
        name = CandidateName("com.acme.Foo", entry="com/acme/Foo.class")
        assert str(name) == "com.acme.Foo (com/acme/Foo.class)"

    def test_str_without_entry(self) -> None:
        assert str(CandidateName("com.acme.Foo")) == "com.acme.Foo"


class TestCandidateNameFailFirst:
    """Tests for FAIL-FIRST validation in CandidateName."""

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            CandidateName("")

    @pytest.mark.parametrize("fqn", ["com.acme.package-info", "com..Foo", "com.1abc"])
    def test_non_identifier_segment_raises(self, fqn: str) -> None:
        with pytest.raises(ValueError, match="not an identifier"):
            CandidateName(fqn)
