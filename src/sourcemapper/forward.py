"""Generated position to original position lookups."""

from sourcemapper.index import MappingIndex, Segment
from sourcemapper.info import SourceMapInfo


def _segment_at(segments: tuple[Segment, ...], column: int) -> Segment:
    # rightmost segment starting at or before the column
    for segment in reversed(segments):
        if segment.generated_column <= column:
            return segment
    return segments[0]


def map_point(index: MappingIndex, line: int, column: int) -> SourceMapInfo | None:
    """Map a position in the generated code to the original source.

    A column before the first segment of the line maps to that first segment.

    Args:
        index: The decoded mappings.
        line: Generated line (0-indexed).
        column: Generated column (0-indexed).

    Returns:
        The original position, or None if the line is out of range or has no
        segments.

    """
    segments = index.segments_of_line(line)
    if not segments:
        return None

    segment = _segment_at(segments, column)
    return SourceMapInfo(
        line=segment.original_line,
        column=segment.original_column,
        file_name=index.source_at(segment.source_index),
        name=index.name_at(segment.name_index),
    )


def map_line(index: MappingIndex, line: int) -> SourceMapInfo | None:
    """Map a generated line to the start of its original line.

    The source file is looked up without a bounds check; callers must only
    use this on maps whose segments reference valid sources.

    Args:
        index: The decoded mappings.
        line: Generated line (0-indexed).

    Returns:
        The original line of the first segment with column 0, or None if the
        line is out of range or has no segments.

    Raises:
        IndexError: If the first segment references a source past the end of
            the sources table.

    """
    segments = index.segments_of_line(line)
    if not segments:
        return None

    first = segments[0]
    return SourceMapInfo(
        line=first.original_line,
        column=0,
        file_name=index.sources[first.source_index],
        name=index.name_at(first.name_index),
    )
