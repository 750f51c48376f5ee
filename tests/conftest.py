"""Shared fixtures for sourcemapper tests."""

import json
from collections.abc import Callable, Sequence

import pytest

from sourcemapper.vlq import BASE64_ALPHABET


def _encode_value(value: int) -> str:
    vlq = ((-value) << 1) | 1 if value < 0 else value << 1
    chars = []
    while True:
        digit = vlq & 0x1F
        vlq >>= 5
        if vlq:
            digit |= 0x20
        chars.append(BASE64_ALPHABET[digit])
        if not vlq:
            return "".join(chars)


def _encode_segment(fields: Sequence[int]) -> str:
    return "".join(_encode_value(field) for field in fields)


@pytest.fixture
def encode_vlq() -> Callable[[Sequence[int]], str]:
    """Encode a sequence of integers as one VLQ segment."""
    return _encode_segment


@pytest.fixture
def make_map_text() -> Callable[..., str]:
    """Build source map JSON text, defaulting to a single-source map."""

    def _make(
        mappings: str = "",
        *,
        sources: Sequence[str] = ("input.ts",),
        names: Sequence[str] = (),
        file: str = "output.js",
        **extra: object,
    ) -> str:
        document: dict[str, object] = {
            "version": 3,
            "file": file,
            "sources": list(sources),
            "names": list(names),
            "mappings": mappings,
        }
        document.update(extra)
        return json.dumps(document)

    return _make
