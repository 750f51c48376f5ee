"""Error code definitions for source map decoding.

Provide standardized error codes for identifying the specific condition that
aborted a source map build.
"""

from enum import Enum

from sourcemapper.log import get_logger

logger = get_logger(__name__)

_FORMAT_MAX = 1
"""Maximum error code number for format errors."""


class ErrorCode(str, Enum):
    """Source map decoding error codes.

    Error codes follow the convention M0001-M9999 where the number
    indicates the error category:
    - M0001: Format errors (unsupported map revision)
    - M0002 and up: Data errors (malformed mappings or document)
    """

    # Format errors
    M0001 = "M0001"
    """Source map version is not 3."""

    # Data errors
    M0002 = "M0002"
    """Character outside the base64 alphabet."""

    M0003 = "M0003"
    """Input ended while a VLQ continuation was pending."""

    M0004 = "M0004"
    """VLQ value does not fit in 32 bits."""

    M0005 = "M0005"
    """Segment decoded to zero fields."""

    M0006 = "M0006"
    """Document is not a JSON object or has malformed fields."""

    @property
    def category(self) -> str:
        """Get the error category for this code.

        Returns:
            Human-readable category name.

        """
        code_num = int(self.value[1:])
        if code_num <= _FORMAT_MAX:
            return "format"
        return "data"


# Error message templates for each code
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.M0001: "only V3 source maps are supported, got version {version}",
    ErrorCode.M0002: "invalid data in source map, base64 data out of range: '{char}'",
    ErrorCode.M0003: "invalid data in source map, continued value doesn't continue",
    ErrorCode.M0004: "invalid data in source map, value is outside of 32-bit range",
    ErrorCode.M0005: "invalid data in source map, no starting column",
    ErrorCode.M0006: "invalid source map document: {reason}",
}


def format_error_message(code: ErrorCode, **kwargs: object) -> str:
    """Format an error message with the given parameters.

    Args:
        code: The error code.
        **kwargs: Parameters to substitute in the message template.

    Returns:
        Formatted error message string.

    """
    template = ERROR_MESSAGES.get(code, "unknown error")
    try:
        return template.format(**kwargs)
    except KeyError as e:
        logger.warning("Missing parameter for error message: %s", e)
        return template
