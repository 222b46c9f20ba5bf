"""Encode channel sample sequences as a canonical 16-bit PCM WAV file."""

from __future__ import annotations

import io
import logging
import operator
import struct
from typing import Sequence

import numpy as np

from pcmwav.errors import (
    DataTooLargeError,
    InvalidChannelDataError,
    InvalidSampleRateError,
    SampleOutOfRangeError,
)
from pcmwav.format import (
    BITS_PER_SAMPLE,
    DATA_TAG,
    FMT_CHUNK_SIZE,
    FMT_TAG,
    INT16_MAX,
    INT16_MIN,
    RIFF_BASE_SIZE,
    RIFF_TAG,
    UINT32_MAX,
    WAVE_FORMAT_PCM,
    WAVE_TAG,
    ChannelLayout,
)


logger = logging.getLogger(__name__)

_FMT_BODY = struct.Struct("<HHIIHH")
_U32 = struct.Struct("<I")


def _channel_array(samples: Sequence[int], index: int) -> np.ndarray:
    try:
        arr = np.asarray(samples)
    except (TypeError, ValueError) as e:
        raise InvalidChannelDataError(f"channel {index} is not a sample sequence: {e}") from e

    if arr.ndim != 1:
        raise InvalidChannelDataError(
            f"channel {index} must be a flat sequence of samples (got {arr.ndim} dimensions)"
        )
    if arr.size == 0:
        return arr.astype(np.int64)
    if arr.dtype.kind not in ("i", "u"):
        raise InvalidChannelDataError(
            f"channel {index} must contain integers (got dtype {arr.dtype})"
        )

    low, high = int(arr.min()), int(arr.max())
    if low < INT16_MIN or high > INT16_MAX:
        raise SampleOutOfRangeError(
            f"channel {index} has samples outside [{INT16_MIN}, {INT16_MAX}] "
            f"(min {low}, max {high})"
        )
    return arr


def _validate_sample_rate(sample_rate: int, layout: ChannelLayout) -> int:
    if isinstance(sample_rate, bool):
        raise InvalidSampleRateError(f"sample rate must be an integer, got {sample_rate!r}")
    try:
        rate = operator.index(sample_rate)
    except TypeError as e:
        raise InvalidSampleRateError(f"sample rate must be an integer, got {sample_rate!r}") from e
    if rate < 0 or rate > UINT32_MAX or layout.byte_rate(rate) > UINT32_MAX:
        raise InvalidSampleRateError(
            f"sample rate {rate} Hz cannot be stored for {layout.count} channel(s)"
        )
    return rate


def _interleave(arrays: list[np.ndarray], layout: ChannelLayout) -> np.ndarray:
    if layout is ChannelLayout.MONO:
        return arrays[0]

    left, right = arrays
    if len(left) != len(right):
        logger.warning(
            "Stereo channels differ in length (%d vs %d); truncating to %d frames",
            len(left),
            len(right),
            min(len(left), len(right)),
        )
    frames = min(len(left), len(right))
    return np.column_stack((left[:frames], right[:frames])).reshape(-1)


def write_riff_chunk(out: io.BytesIO, data_size: int) -> None:
    out.write(RIFF_TAG)
    out.write(_U32.pack(RIFF_BASE_SIZE + data_size))
    out.write(WAVE_TAG)


def write_fmt_chunk(out: io.BytesIO, layout: ChannelLayout, sample_rate: int) -> None:
    out.write(FMT_TAG)
    out.write(_U32.pack(FMT_CHUNK_SIZE))
    out.write(
        _FMT_BODY.pack(
            WAVE_FORMAT_PCM,
            layout.count,
            sample_rate,
            layout.byte_rate(sample_rate),
            layout.block_align,
            BITS_PER_SAMPLE,
        )
    )


def write_data_chunk(out: io.BytesIO, payload: bytes) -> None:
    out.write(DATA_TAG)
    out.write(_U32.pack(len(payload)))
    out.write(payload)


def encode(channels: Sequence[Sequence[int]], sample_rate: int) -> bytes:
    """Encode one (mono) or two (stereo) channels of int16 samples as WAV bytes.

    Stereo channels of unequal length are truncated to the shorter one; the
    header always describes the samples actually written.
    """
    layout = ChannelLayout.from_count(len(channels))
    rate = _validate_sample_rate(sample_rate, layout)
    arrays = [_channel_array(samples, i) for i, samples in enumerate(channels)]

    payload = _interleave(arrays, layout).astype("<i2").tobytes()
    if RIFF_BASE_SIZE + len(payload) > UINT32_MAX:
        raise DataTooLargeError(f"{len(payload)} bytes of samples do not fit in a RIFF file")

    out = io.BytesIO()
    write_riff_chunk(out, len(payload))
    write_fmt_chunk(out, layout, rate)
    write_data_chunk(out, payload)
    return out.getvalue()
