"""Source map facade.

Build the document and mapping index once from map text and answer
positional queries against them.
"""

from typing import Protocol

from sourcemapper.backward import map_point_back
from sourcemapper.document import SourceMapDocument
from sourcemapper.forward import map_line, map_point
from sourcemapper.index import MappingIndex
from sourcemapper.info import SourceMapInfo
from sourcemapper.parser import build_index, load_document


class TextReader(Protocol):
    """Anything with a `read()` returning the whole text."""

    def read(self) -> str: ...


class SourceMap:
    """A decoded version 3 source map.

    Instances are read-only after construction and may be queried from any
    number of threads.
    """

    __slots__ = ("_document", "_index")

    def __init__(self, document: SourceMapDocument, index: MappingIndex) -> None:
        """Initialize the source map.

        Args:
            document: The validated document.
            index: Mappings decoded from the document.

        """
        self._document = document
        self._index = index

    @classmethod
    def from_text(cls, text: str) -> "SourceMap":
        """Build a source map from its JSON text.

        Args:
            text: JSON text of the source map.

        Returns:
            The decoded source map.

        Raises:
            InvalidDataError: If the document or its mappings are malformed.
            UnsupportedFormatError: If the document is not a version 3 map.

        """
        document = load_document(text)
        return cls(document, build_index(document))

    @classmethod
    def from_reader(cls, reader: TextReader) -> "SourceMap":
        """Build a source map from an open text stream.

        Args:
            reader: Stream positioned at the start of the map.

        Returns:
            The decoded source map.

        """
        return cls.from_text(reader.read())

    @property
    def version(self) -> int:
        """Source map version, always 3."""
        return self._document.version

    @property
    def file(self) -> str:
        """Name of the generated file."""
        return self._document.file

    @property
    def sources(self) -> tuple[str, ...]:
        """Original source files, with the source root applied."""
        return self._index.sources

    @property
    def names(self) -> tuple[str, ...]:
        """Symbol names referenced by the mappings."""
        return self._index.names

    @property
    def document(self) -> SourceMapDocument:
        """The validated document."""
        return self._document

    @property
    def index(self) -> MappingIndex:
        """The decoded mappings."""
        return self._index

    @property
    def line_count(self) -> int:
        """Number of generated lines in the mappings."""
        return self._index.line_count

    def map_point(self, line: int, column: int) -> SourceMapInfo | None:
        """Map a generated position to the original source.

        Args:
            line: Generated line (0-indexed).
            column: Generated column (0-indexed).

        Returns:
            The original position, or None if not found.

        """
        return map_point(self._index, line, column)

    def map_line(self, line: int) -> SourceMapInfo | None:
        """Map a generated line to the start of its original line.

        Args:
            line: Generated line (0-indexed).

        Returns:
            The original line with column 0, or None if not found.

        """
        return map_line(self._index, line)

    def map_point_back(self, line: int, column: int) -> SourceMapInfo | None:
        """Map an original position to the generated code.

        Args:
            line: Original line (0-indexed).
            column: Original column (0-indexed).

        Returns:
            The generated position in this map's file, or None if not found.

        """
        return map_point_back(self._index, self._document.file, line, column)

    def __repr__(self) -> str:
        """Get a short description of the map.

        Returns:
            Representation with the file name and line count.

        """
        return f"SourceMap(file={self.file!r}, lines={self.line_count})"


def loads(text: str) -> SourceMap:
    """Build a source map from its JSON text."""
    return SourceMap.from_text(text)


def load(reader: TextReader) -> SourceMap:
    """Build a source map from an open text stream."""
    return SourceMap.from_reader(reader)
