"""SSH wire-format reader (RFC 4251 section 5).

A public key blob is a run of uint32 length-prefixed strings. Integers are
``mpint``: big-endian two's complement inside such a string.
"""
from __future__ import annotations

import base64
import binascii
from typing import Optional


class WireFormatError(ValueError):
    """Blob is truncated or carries bytes beyond its declared fields."""


def _u32(buf: bytes, i: int) -> tuple[int, int]:
    if i + 4 > len(buf):
        raise WireFormatError("truncated length prefix")
    return int.from_bytes(buf[i : i + 4], "big"), i + 4


class WireReader:
    def __init__(self, blob: bytes):
        self._buf = blob
        self._pos = 0

    def read_string(self) -> bytes:
        ln, i = _u32(self._buf, self._pos)
        if i + ln > len(self._buf):
            raise WireFormatError("truncated string field")
        self._pos = i + ln
        return self._buf[i : i + ln]

    def read_text(self) -> str:
        try:
            return self.read_string().decode("ascii")
        except UnicodeDecodeError as e:
            raise WireFormatError("non-ascii text field") from e

    def read_mpint(self) -> int:
        raw = self.read_string()
        return int.from_bytes(raw, "big", signed=True) if raw else 0

    def at_end(self) -> bool:
        return self._pos == len(self._buf)

    def finish(self) -> None:
        if not self.at_end():
            raise WireFormatError("trailing bytes after key fields")


def b64decode_strict(text: str) -> bytes:
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise WireFormatError("payload is not valid base64") from e


def count_fields(blob: bytes) -> Optional[int]:
    """Number of complete fields in ``blob``; None if the framing does not end cleanly."""
    reader = WireReader(blob)
    n = 0
    try:
        while not reader.at_end():
            reader.read_string()
            n += 1
    except WireFormatError:
        return None
    return n


__all__ = ["WireReader", "WireFormatError", "b64decode_strict", "count_fields"]
