"""Source map decoding and position queries.

Decode version 3 source maps and translate positions between generated code
and the original sources it was produced from.
"""

from sourcemapper.document import SourceMapDocument
from sourcemapper.errors import (
    ErrorCode,
    InvalidDataError,
    SourceMapError,
    UnsupportedFormatError,
)
from sourcemapper.index import Line, MappingIndex, Segment
from sourcemapper.info import SourceMapInfo
from sourcemapper.parser import build_index, load_document, parse
from sourcemapper.source_map import SourceMap, load, loads

__all__ = [
    "ErrorCode",
    "InvalidDataError",
    "Line",
    "MappingIndex",
    "Segment",
    "SourceMap",
    "SourceMapDocument",
    "SourceMapError",
    "SourceMapInfo",
    "UnsupportedFormatError",
    "build_index",
    "load",
    "load_document",
    "loads",
    "parse",
]
