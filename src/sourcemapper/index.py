"""Decoded mapping storage.

Hold the absolute segment coordinates of every generated line together with
the resolved source and name tables. Everything here is immutable once built.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Segment:
    """One mapped point of a generated line, in absolute coordinates."""

    generated_column: int
    """Column in the generated line (0-indexed)."""

    source_index: int
    """Index into the sources table."""

    original_line: int
    """Line in the original source (0-indexed)."""

    original_column: int
    """Column in the original source (0-indexed)."""

    name_index: int | None = None
    """Index into the names table, None when the segment names no symbol."""


Line = tuple[Segment, ...]
"""Segments of one generated line, in payload order."""


def _lookup(table: tuple[str, ...], index: int | None) -> str | None:
    if index is None or not 0 <= index < len(table):
        return None
    return table[index]


@dataclass(frozen=True)
class MappingIndex:
    """Per-line segment lists of a source map.

    Lines are indexed by generated line number. A line with no mapping
    information is an empty tuple but still occupies its slot.
    """

    lines: tuple[Line, ...] = ()
    sources: tuple[str, ...] = ()
    """Sources with the source root already applied."""

    names: tuple[str, ...] = ()

    @property
    def line_count(self) -> int:
        """Number of generated lines in the index."""
        return len(self.lines)

    def __len__(self) -> int:
        """Get the number of generated lines.

        Returns:
            Number of lines in the index.

        """
        return len(self.lines)

    def segments_of_line(self, line: int) -> Line | None:
        """Get the segments of a generated line.

        Args:
            line: Generated line number (0-indexed).

        Returns:
            The line's segments, or None if the line is out of range.

        """
        if not 0 <= line < len(self.lines):
            return None
        return self.lines[line]

    def source_at(self, index: int | None) -> str | None:
        """Resolve a source index, None when out of range."""
        return _lookup(self.sources, index)

    def name_at(self, index: int | None) -> str | None:
        """Resolve a name index, None when out of range or absent."""
        return _lookup(self.names, index)
