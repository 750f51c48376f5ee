"""Error handling for source map decoding.

Provide error codes, message templates, and the exception hierarchy raised
while building a source map.
"""

from sourcemapper.errors.codes import ErrorCode, format_error_message
from sourcemapper.errors.exceptions import (
    InvalidDataError,
    SourceMapError,
    UnsupportedFormatError,
)

__all__ = [
    "ErrorCode",
    "InvalidDataError",
    "SourceMapError",
    "UnsupportedFormatError",
    "format_error_message",
]
