"""Base64 with line breaks every 64 characters."""

from __future__ import annotations

import base64
import binascii

_LINE = 64


def encode(data: bytes | bytearray | memoryview | str) -> str:
    """Encode to base64 text, each line of at most 64 characters ending in a newline."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    text = base64.b64encode(bytes(data)).decode("ascii")
    return "".join(text[start:start + _LINE] + "\n" for start in range(0, len(text), _LINE))


def decode(data: bytes | bytearray | str) -> bytes:
    """Decode base64 text; line breaks and other whitespace are ignored."""
    if isinstance(data, str):
        data = data.encode("ascii")
    compact = b"".join(bytes(data).split())
    try:
        return base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc