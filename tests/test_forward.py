"""Tests for generated-to-original position mapping."""

from collections.abc import Callable

import pytest

from sourcemapper.forward import map_line, map_point
from sourcemapper.index import MappingIndex, Segment
from sourcemapper.info import SourceMapInfo
from sourcemapper.parser import parse

# =============================================================================
# map_point Tests
# =============================================================================


class TestMapPoint:
    """Test map_point lookups."""

    def test_exact_segment_start(self, make_map_text: Callable[..., str]) -> None:
        """A column at a segment start maps to that segment."""
        index = parse(make_map_text("AAAA;CAAC"))
        assert map_point(index, 0, 0) == SourceMapInfo(0, 0, "input.ts", None)

    def test_column_after_last_segment(
        self,
        make_map_text: Callable[..., str],
    ) -> None:
        """A column past the last segment maps to the last segment."""
        index = parse(make_map_text("AAAA;CAAC"))
        assert map_point(index, 1, 5) == SourceMapInfo(0, 1, "input.ts", None)

    def test_column_before_first_segment(
        self,
        make_map_text: Callable[..., str],
    ) -> None:
        """A column before every segment falls back to the first one."""
        index = parse(make_map_text("AAAA;CAAC"))
        assert map_point(index, 1, 0) == SourceMapInfo(0, 1, "input.ts", None)

    def test_rightmost_preceding_segment(
        self,
        make_map_text: Callable[..., str],
    ) -> None:
        """The closest segment at or before the column wins."""
        index = parse(
            make_map_text("AAAAA,IAAIC,IAAI", names=["greet", "name"]),
        )
        assert map_point(index, 0, 3) == SourceMapInfo(0, 0, "input.ts", "greet")
        assert map_point(index, 0, 4) == SourceMapInfo(0, 4, "input.ts", "name")
        assert map_point(index, 0, 7) == SourceMapInfo(0, 4, "input.ts", "name")
        assert map_point(index, 0, 8) == SourceMapInfo(0, 8, "input.ts", None)

    @pytest.mark.parametrize("line", [2, 5, -1])
    def test_line_out_of_range(
        self,
        line: int,
        make_map_text: Callable[..., str],
    ) -> None:
        """Lines outside the index are not found."""
        index = parse(make_map_text("AAAA;CAAC"))
        assert map_point(index, line, 0) is None

    def test_empty_line(self, make_map_text: Callable[..., str]) -> None:
        """A line without segments is not found."""
        index = parse(make_map_text(";AAAA"))
        assert map_point(index, 0, 0) is None
        assert map_point(index, 1, 0) is not None

    @pytest.mark.parametrize("mappings", ["ACAA", "ADAA"])
    def test_source_index_out_of_range(
        self,
        mappings: str,
        make_map_text: Callable[..., str],
    ) -> None:
        """An invalid source index degrades to no file."""
        index = parse(make_map_text(mappings, sources=["a.ts"]))
        result = map_point(index, 0, 0)
        assert result == SourceMapInfo(0, 0, None, None)

    def test_name_index_out_of_range(
        self,
        make_map_text: Callable[..., str],
    ) -> None:
        """An invalid name index degrades to no name."""
        index = parse(make_map_text("AAAAE", names=["x"]))
        result = map_point(index, 0, 0)
        assert result is not None
        assert result.file_name == "input.ts"
        assert result.name is None


# =============================================================================
# map_line Tests
# =============================================================================


class TestMapLine:
    """Test map_line lookups."""

    def test_first_segment_with_column_zero(
        self,
        make_map_text: Callable[..., str],
    ) -> None:
        """The first segment's line is returned with column 0."""
        index = parse(make_map_text("AAAA;CACE,CAAC"))
        assert map_line(index, 1) == SourceMapInfo(1, 0, "input.ts", None)

    def test_agrees_with_map_point(self, make_map_text: Callable[..., str]) -> None:
        """map_line reports the same original line as map_point."""
        index = parse(make_map_text("EAAA;IACE,CACE;AAAA"))
        for line in range(index.line_count):
            first_column = index.lines[line][0].generated_column
            by_line = map_line(index, line)
            assert by_line is not None
            assert by_line.column == 0
            by_point = map_point(index, line, first_column)
            assert by_point is not None
            assert by_line.line == by_point.line

    def test_resolves_name(self, make_map_text: Callable[..., str]) -> None:
        """The first segment's name is resolved."""
        index = parse(make_map_text("AAAAA", names=["main"]))
        result = map_line(index, 0)
        assert result is not None
        assert result.name == "main"

    def test_not_found(self, make_map_text: Callable[..., str]) -> None:
        """Empty and out-of-range lines are not found."""
        index = parse(make_map_text("AAAA;"))
        assert map_line(index, 1) is None
        assert map_line(index, 2) is None
        assert map_line(index, -1) is None

    def test_source_lookup_not_bounds_checked(self) -> None:
        """An invalid source index surfaces as IndexError."""
        index = MappingIndex(lines=((Segment(0, 3, 0, 0),),), sources=("a.ts",))
        with pytest.raises(IndexError):
            map_line(index, 0)
