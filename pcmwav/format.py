"""Shared RIFF/WAVE constants for 16-bit PCM files."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pcmwav.errors import UnsupportedChannelCountError


RIFF_TAG = b"RIFF"
WAVE_TAG = b"WAVE"
FMT_TAG = b"fmt "
DATA_TAG = b"data"

FMT_CHUNK_SIZE = 16
WAVE_FORMAT_PCM = 1
BITS_PER_SAMPLE = 16
SAMPLE_WIDTH = BITS_PER_SAMPLE // 8

# "WAVE" + fmt chunk (8 + 16) + data chunk header (8).
RIFF_BASE_SIZE = 36

INT16_MIN = -(1 << 15)
INT16_MAX = (1 << 15) - 1
UINT32_MAX = (1 << 32) - 1


class ChannelLayout(enum.Enum):
    MONO = 1
    STEREO = 2

    @classmethod
    def from_count(cls, count: int) -> "ChannelLayout":
        try:
            return cls(int(count))
        except ValueError:
            raise UnsupportedChannelCountError(
                f"unsupported number of channels: {count} (expected 1 or 2)"
            ) from None

    @property
    def count(self) -> int:
        return self.value

    @property
    def block_align(self) -> int:
        return self.value * SAMPLE_WIDTH

    def byte_rate(self, sample_rate: int) -> int:
        return int(sample_rate) * self.block_align


class DataBound(enum.Enum):
    """How the declared data-chunk size limits sample reading.

    LENGTH counts bytes from the start of the sample payload. OFFSET compares
    the absolute buffer offset against the declared size, which is what some
    older readers did; it drops (or skips entirely) the samples that fall
    before the header length.
    """

    LENGTH = "length"
    OFFSET = "offset"

    @classmethod
    def parse(cls, raw: "str | DataBound") -> "DataBound":
        if isinstance(raw, DataBound):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            choices = ", ".join(b.value for b in cls)
            raise ValueError(f"unknown data bound {raw!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class FormatSpec:
    layout: ChannelLayout
    sample_rate: int

    @property
    def channel_count(self) -> int:
        return self.layout.count
