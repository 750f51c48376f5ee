"""Source map parser.

Load the JSON document, validate it, and decode the mappings payload into a
MappingIndex of absolute coordinates.
"""

import json

from pydantic import ValidationError

from sourcemapper import vlq
from sourcemapper.document import SUPPORTED_VERSION, SourceMapDocument
from sourcemapper.errors import ErrorCode, InvalidDataError, UnsupportedFormatError
from sourcemapper.index import Line, MappingIndex, Segment
from sourcemapper.log import get_logger

logger = get_logger(__name__)

LINE_SEPARATOR = ";"
SEGMENT_SEPARATOR = ","

# Positions of the fields within a decoded segment
GENERATED_COLUMN_FIELD = 0
SOURCE_FIELD = 1
ORIGINAL_LINE_FIELD = 2
ORIGINAL_COLUMN_FIELD = 3
NAME_FIELD = 4


def _check_version(raw: dict[str, object]) -> None:
    version = raw.get("version")
    # bool is an int subclass but never a valid version
    if (
        isinstance(version, bool)
        or not isinstance(version, int)
        or version != SUPPORTED_VERSION
    ):
        raise UnsupportedFormatError(version)


def load_document(text: str) -> SourceMapDocument:
    """Decode and validate source map text.

    Args:
        text: JSON text of the source map.

    Returns:
        The validated document.

    Raises:
        InvalidDataError: If the text is not a JSON object, is nested too
            deeply to decode, or a sources or names entry is not a string.
        UnsupportedFormatError: If the version is missing or not 3.

    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise InvalidDataError(ErrorCode.M0006, reason=str(e)) from e

    if not isinstance(raw, dict):
        reason = f"expected an object, got {type(raw).__name__}"
        raise InvalidDataError(ErrorCode.M0006, reason=reason)

    _check_version(raw)

    try:
        return SourceMapDocument.model_validate(raw)
    except ValidationError as e:
        reason = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidDataError(ErrorCode.M0006, reason=reason) from e


class _Accumulator:
    """Running totals of the delta-encoded segment fields.

    Source, original line, original column and name carry across the whole
    document. The generated column restarts at every line.
    """

    def __init__(self) -> None:
        self.source_index = 0
        self.original_line = 0
        self.original_column = 0
        self.name_index = 0

    def decode_line(self, line_no: int, text: str) -> Line:
        if not text:
            return ()

        generated_column = 0
        segments: list[Segment] = []
        for seg_no, chunk in enumerate(text.split(SEGMENT_SEPARATOR)):
            try:
                fields = vlq.decode(chunk)
            except InvalidDataError as e:
                e.with_location(line_no, seg_no)
                raise
            if not fields:
                raise InvalidDataError(ErrorCode.M0005, line=line_no, segment=seg_no)

            generated_column += fields[GENERATED_COLUMN_FIELD]
            count = len(fields)
            if count > SOURCE_FIELD:
                self.source_index += fields[SOURCE_FIELD]
            if count > ORIGINAL_LINE_FIELD:
                self.original_line += fields[ORIGINAL_LINE_FIELD]
            if count > ORIGINAL_COLUMN_FIELD:
                self.original_column += fields[ORIGINAL_COLUMN_FIELD]
            name_index = None
            if count > NAME_FIELD:
                self.name_index += fields[NAME_FIELD]
                name_index = self.name_index

            segments.append(
                Segment(
                    generated_column=generated_column,
                    source_index=self.source_index,
                    original_line=self.original_line,
                    original_column=self.original_column,
                    name_index=name_index,
                ),
            )

        return tuple(segments)


def build_index(document: SourceMapDocument) -> MappingIndex:
    """Decode the mappings of a validated document.

    Args:
        document: The source map document.

    Returns:
        Index of absolute segment coordinates, one entry per generated line.

    Raises:
        InvalidDataError: If any segment fails to decode.

    """
    lines: tuple[Line, ...] = ()
    if document.mappings is not None:
        accumulator = _Accumulator()
        lines = tuple(
            accumulator.decode_line(line_no, text)
            for line_no, text in enumerate(document.mappings.split(LINE_SEPARATOR))
        )

    index = MappingIndex(
        lines=lines,
        sources=document.resolved_sources,
        names=document.names,
    )
    logger.debug(
        "Built mapping index for %s: %d lines, %d sources, %d names",
        document.file or "<unnamed>",
        index.line_count,
        len(index.sources),
        len(index.names),
    )
    return index


def parse(text: str) -> MappingIndex:
    """Parse source map text into a mapping index.

    Args:
        text: JSON text of the source map.

    Returns:
        The decoded mapping index.

    Raises:
        InvalidDataError: If the document or its mappings are malformed.
        UnsupportedFormatError: If the document is not a version 3 map.

    """
    return build_index(load_document(text))
