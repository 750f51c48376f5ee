"""Base64 VLQ decoding for source map mappings.

Each character carries a 6-bit group: the low 5 bits are payload and bit 5
flags a continuation. Groups are little-endian and the least significant bit
of the assembled value is the sign.
"""

from sourcemapper.errors import ErrorCode, InvalidDataError

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
"""Standard base64 alphabet, in value order."""

VLQ_SHIFT = 5
"""Payload bits per character."""

VLQ_CONTINUATION_MASK = 1 << VLQ_SHIFT
"""Bit set on every group that is followed by another."""

VLQ_PAYLOAD_MASK = VLQ_CONTINUATION_MASK - 1

MAX_VALUE = 2**31 - 1
"""Largest accumulated total accepted before the sign split."""

_BASE64_VALUES: dict[str, int] = {char: i for i, char in enumerate(BASE64_ALPHABET)}


def decode(chars: str) -> list[int]:
    """Decode a run of base64 VLQ characters.

    Args:
        chars: Characters of a single mappings segment.

    Returns:
        Signed integers in input order. Empty input yields an empty list.

    Raises:
        InvalidDataError: On a character outside the base64 alphabet, input
            ending while a continuation is pending, or a value exceeding the
            signed 32-bit range.

    """
    values: list[int] = []
    pos = 0
    end = len(chars)

    while pos < end:
        total = 0
        shift = 0
        while True:
            if pos == end:
                raise InvalidDataError(ErrorCode.M0003)

            char = chars[pos]
            pos += 1
            digit = _BASE64_VALUES.get(char)
            if digit is None:
                raise InvalidDataError(ErrorCode.M0002, char=char)

            total |= (digit & VLQ_PAYLOAD_MASK) << shift
            if total > MAX_VALUE:
                raise InvalidDataError(ErrorCode.M0004)
            shift += VLQ_SHIFT

            if not digit & VLQ_CONTINUATION_MASK:
                break

        # least significant bit is the sign
        if total & 1:
            values.append(-(total >> 1))
        else:
            values.append(total >> 1)

    return values
