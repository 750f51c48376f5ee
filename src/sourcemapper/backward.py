"""Original position to generated position lookups."""

from sourcemapper.index import MappingIndex
from sourcemapper.info import SourceMapInfo
from sourcemapper.log import get_logger

logger = get_logger(__name__)


def map_point_back(
    index: MappingIndex,
    generated_file: str,
    line: int,
    column: int,
) -> SourceMapInfo | None:
    """Map a position in the original source to the generated code.

    Generated lines are scanned in order. On each line, the closest original
    column at or before the requested one is remembered; a later segment on
    the same original line that starts past the requested column then yields
    an exact match. Lines touching the requested original line without such
    a match are remembered as fallbacks, and the second of them wins.

    Code like::

        constructor(public greeting: string) { }

    compiles into::

        function Greeter(greeting) {
            this.greeting = greeting;
        }

    where only the second generated line is one a debugger stops on.

    Args:
        index: The decoded mappings.
        generated_file: Name of the generated file, reported in the result.
        line: Original line (0-indexed).
        column: Original column (0-indexed).

    Returns:
        The generated position, or None if no generated line maps to the
        original line.

    """
    first_best_line: int | None = None
    second_best_line: int | None = None

    for line_no, segments in enumerate(index.lines):
        original_column: int | None = None
        for segment in segments:
            if segment.original_line == line:
                if segment.original_column <= column:
                    original_column = segment.original_column
                elif original_column is not None:
                    return SourceMapInfo(
                        line=line_no,
                        column=column - original_column,
                        file_name=generated_file,
                    )
                elif first_best_line is None:
                    first_best_line = line_no
                elif second_best_line is None and first_best_line != line_no:
                    second_best_line = line_no
            elif segment.original_line > line and first_best_line is not None:
                # no exact column match, e.g. requested 0 but mapping starts at 4
                return _best_line_info(first_best_line, second_best_line, generated_file)

    if first_best_line is not None:
        return _best_line_info(first_best_line, second_best_line, generated_file)

    logger.debug("No generated position for %d:%d", line, column)
    return None


def _best_line_info(
    first_best_line: int,
    second_best_line: int | None,
    generated_file: str,
) -> SourceMapInfo:
    best = second_best_line if second_best_line is not None else first_best_line
    return SourceMapInfo(line=best, column=0, file_name=generated_file)
