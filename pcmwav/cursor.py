"""Bounds-checked little-endian reads over an in-memory buffer."""

from __future__ import annotations

import struct
from typing import Type

from pcmwav.errors import UnexpectedEofError, WavDecodeError


_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class ByteCursor:
    def __init__(self, buf: bytes | bytearray | memoryview) -> None:
        self._buf = memoryview(buf).cast("B")
        self.offset = 0

    def __len__(self) -> int:
        return len(self._buf)

    @property
    def remaining(self) -> int:
        return max(0, len(self._buf) - self.offset)

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self._buf)

    def _require(self, size: int, what: str) -> None:
        if size > self.remaining:
            raise UnexpectedEofError(
                f"truncated input reading {what} at offset {self.offset}: "
                f"need {size} bytes, {self.remaining} available"
            )

    def read(self, size: int, what: str = "bytes") -> memoryview:
        self._require(size, what)
        start = self.offset
        self.offset += size
        return self._buf[start : self.offset]

    def skip(self, size: int) -> None:
        # Allowed to move past the end; the next read reports the truncation.
        self.offset += size

    def u16(self, what: str = "u16") -> int:
        self._require(_U16.size, what)
        (value,) = _U16.unpack_from(self._buf, self.offset)
        self.offset += _U16.size
        return value

    def u32(self, what: str = "u32") -> int:
        self._require(_U32.size, what)
        (value,) = _U32.unpack_from(self._buf, self.offset)
        self.offset += _U32.size
        return value

    def tag(self) -> bytes:
        return bytes(self.read(4, "chunk tag"))

    def expect_tag(self, expected: bytes, error: Type[WavDecodeError], message: str) -> None:
        found = self.tag()
        if found != expected:
            raise error(f"{message} (expected {expected!r}, found {found!r})")
