"""Exceptions raised while building a source map.

Every failure aborts the whole build, so callers never observe a partially
decoded index.
"""

from sourcemapper.errors.codes import ErrorCode, format_error_message


class SourceMapError(Exception):
    """Base exception for source map build errors."""

    def __init__(self, code: ErrorCode, **kwargs: object) -> None:
        """Initialize source map error.

        Args:
            code: Error code identifying the failure.
            **kwargs: Parameters for the code's message template.

        """
        super().__init__(format_error_message(code, **kwargs))
        self.code = code


class UnsupportedFormatError(SourceMapError):
    """Raised when the document is not a version 3 source map."""

    def __init__(self, version: object) -> None:
        """Initialize unsupported format error.

        Args:
            version: The version value found in the document.

        """
        super().__init__(ErrorCode.M0001, version=version)
        self.version = version


class InvalidDataError(SourceMapError):
    """Raised when the document or its mappings payload is malformed."""

    def __init__(
        self,
        code: ErrorCode,
        *,
        line: int | None = None,
        segment: int | None = None,
        **kwargs: object,
    ) -> None:
        """Initialize invalid data error.

        Args:
            code: Error code identifying the failure.
            line: Generated line (0-indexed) whose mappings failed to decode.
            segment: Segment position (0-indexed) within that line.
            **kwargs: Parameters for the code's message template.

        """
        super().__init__(code, **kwargs)
        self.line = line
        self.segment = segment

    def with_location(self, line: int, segment: int) -> "InvalidDataError":
        """Attach the mappings location where decoding failed.

        Args:
            line: Generated line (0-indexed).
            segment: Segment position (0-indexed) within the line.

        Returns:
            Self for chaining.

        """
        self.line = line
        self.segment = segment
        return self

    def __str__(self) -> str:
        """Format error with the mappings location when known.

        Returns:
            Error message, suffixed with the line and segment if set.

        """
        message = super().__str__()
        if self.line is None:
            return message
        if self.segment is None:
            return f"{message} (generated line {self.line})"
        return f"{message} (generated line {self.line}, segment {self.segment})"
