"""Tests for version parser."""

from __future__ import annotations

import pytest

from versionhub.controllers.inventory.parsers.version_parser import VersionParser


@pytest.fixture
def parser() -> VersionParser:
    return VersionParser()


class TestVersionParser:
    """Both observed payload shapes normalize to the same list."""

    def test_bare_list(self, parser: VersionParser) -> None:
        assert parser.parse_versions(["1.3.0", "1.2.1"]) == ["1.3.0", "1.2.1"]

    def test_wrapped_list(self, parser: VersionParser) -> None:
        assert parser.parse_versions({"versions": ["1.3.0", "1.2.1"]}) == [
            "1.3.0",
            "1.2.1",
        ]

    def test_order_is_preserved(self, parser: VersionParser) -> None:
        assert parser.parse_versions(["0.9.0", "2.0.0", "1.0.0"]) == [
            "0.9.0",
            "2.0.0",
            "1.0.0",
        ]

    def test_numeric_entries_become_strings(self, parser: VersionParser) -> None:
        assert parser.parse_versions([2, 1.5]) == ["2", "1.5"]

    def test_empty(self, parser: VersionParser) -> None:
        assert parser.parse_versions([]) == []
        assert parser.parse_versions({"versions": []}) == []

    @pytest.mark.parametrize(
        "raw",
        [None, "1.0.0", {"latest": "1.0.0"}, {"versions": None}, [None], [{"v": 1}], [True]],
    )
    def test_unrecognized_shapes_raise(self, parser: VersionParser, raw: object) -> None:
        with pytest.raises(ValueError):
            parser.parse_versions(raw)
