"""Decode 16-bit PCM RIFF/WAVE bytes into an :class:`AudioRecord`.

The decoder walks the buffer with a single cursor:

1. RIFF header (`RIFF`, size, `WAVE`); the RIFF size is not checked.
2. The base 16-byte `fmt ` chunk, which must directly follow the header.
3. Any other chunks (`LIST`, `fact`, ...) until `data`, skipped by size.
4. The data chunk payload, de-interleaved into one list per channel.

Truncated input raises :class:`UnexpectedEofError` instead of reading past
the end of the buffer.
"""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from pcmwav.cursor import ByteCursor
from pcmwav.errors import (
    DataChunkNotFoundError,
    FormatChunkMissingError,
    FormatChunkWrongSizeError,
    InconsistentFormatChunkError,
    NotPcmError,
    NotRiffError,
    NotWaveError,
)
from pcmwav.format import (
    BITS_PER_SAMPLE,
    DATA_TAG,
    FMT_CHUNK_SIZE,
    FMT_TAG,
    RIFF_TAG,
    WAVE_FORMAT_PCM,
    WAVE_TAG,
    ChannelLayout,
    DataBound,
    FormatSpec,
)
from pcmwav.record import AudioRecord


logger = logging.getLogger(__name__)

_SAMPLE_DTYPE = np.dtype("<i2")


def parse_riff_chunk(cursor: ByteCursor) -> None:
    cursor.expect_tag(RIFF_TAG, NotRiffError, "not a RIFF file")
    # Overall RIFF size is deliberately not checked against the buffer.
    cursor.skip(4)
    cursor.expect_tag(WAVE_TAG, NotWaveError, "not a WAVE file")


def parse_fmt_chunk(cursor: ByteCursor) -> FormatSpec:
    cursor.expect_tag(FMT_TAG, FormatChunkMissingError, "fmt chunk not found")

    size = cursor.u32("fmt chunk size")
    if size != FMT_CHUNK_SIZE:
        raise FormatChunkWrongSizeError(
            f"fmt chunk has size {size}; only the {FMT_CHUNK_SIZE}-byte PCM chunk is supported"
        )

    audio_format = cursor.u16("audio format")
    if audio_format != WAVE_FORMAT_PCM:
        raise NotPcmError(f"not a PCM file (audio format tag {audio_format})")

    channel_count = cursor.u16("channel count")
    sample_rate = cursor.u32("sample rate")
    byte_rate = cursor.u32("byte rate")
    block_align = cursor.u16("block align")
    bits_per_sample = cursor.u16("bits per sample")

    expected_byte_rate = sample_rate * channel_count * bits_per_sample // 8
    if byte_rate != expected_byte_rate:
        raise InconsistentFormatChunkError(
            f"byte rate {byte_rate} does not match sample rate {sample_rate}, "
            f"{channel_count} channel(s) and {bits_per_sample} bits (expected {expected_byte_rate})"
        )

    expected_block_align = channel_count * bits_per_sample // 8
    if block_align != expected_block_align:
        raise InconsistentFormatChunkError(
            f"block align {block_align} does not match {channel_count} channel(s) "
            f"and {bits_per_sample} bits (expected {expected_block_align})"
        )

    if bits_per_sample != BITS_PER_SAMPLE:
        logger.warning(
            "fmt chunk declares %s bits per sample; decoding as %s-bit anyway",
            bits_per_sample,
            BITS_PER_SAMPLE,
        )

    layout = ChannelLayout.from_count(channel_count)
    return FormatSpec(layout=layout, sample_rate=sample_rate)


def find_data_chunk(cursor: ByteCursor) -> None:
    """Advance past the `data` tag, leaving the cursor on its size field."""
    while True:
        if cursor.at_end:
            raise DataChunkNotFoundError(f"data chunk not found in {len(cursor)} bytes")

        tag = cursor.tag()
        if tag == DATA_TAG:
            return
        if cursor.at_end:
            raise DataChunkNotFoundError(
                f"data chunk not found; buffer ends after {tag!r} tag at offset {cursor.offset}"
            )

        size = cursor.u32("chunk size")
        logger.debug("Skipping %r chunk (%d bytes) at offset %d", tag, size, cursor.offset)
        cursor.skip(size)


def parse_data_chunk(cursor: ByteCursor, spec: FormatSpec, bound: DataBound) -> list[list[int]]:
    size = cursor.u32("data chunk size")
    start = cursor.offset

    if bound is DataBound.OFFSET:
        limit = size - start
    else:
        limit = size

    # Whole frames are read while the bound holds, so a partial trailing
    # frame still consumes a full frame.
    block_align = spec.layout.block_align
    frames = -(-max(0, limit) // block_align)
    payload = cursor.read(frames * block_align, "data chunk samples")
    samples = np.frombuffer(payload, dtype=_SAMPLE_DTYPE)

    if spec.layout is ChannelLayout.MONO:
        return [samples.tolist()]
    return samples.reshape(-1, 2).T.tolist()


def decode(
    buffer: bytes | bytearray | memoryview,
    *,
    data_bound: Union[DataBound, str] = DataBound.LENGTH,
) -> AudioRecord:
    """Decode a complete 16-bit PCM WAV file held in memory."""
    bound = DataBound.parse(data_bound)

    cursor = ByteCursor(buffer)
    parse_riff_chunk(cursor)
    spec = parse_fmt_chunk(cursor)
    find_data_chunk(cursor)
    channels = parse_data_chunk(cursor, spec, bound)

    logger.debug(
        "Decoded %d channel(s) x %d frames at %d Hz (%s bound)",
        spec.channel_count,
        len(channels[0]),
        spec.sample_rate,
        bound.value,
    )
    return AudioRecord(sample_rate=spec.sample_rate, channels=channels)
