"""Query result type shared by the forward and backward mappers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceMapInfo:
    """A position found by a source map query.

    For forward queries the position is in the original source and
    `file_name` is the original source file. For backward queries it is in
    the generated code and `file_name` is the map's generated file.
    """

    line: int
    """Line number (0-indexed)."""

    column: int
    """Column number (0-indexed)."""

    file_name: str | None = None
    """File the position refers to, None when unknown."""

    name: str | None = None
    """Symbol name at the position, None when unknown."""
