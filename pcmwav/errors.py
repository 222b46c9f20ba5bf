"""Error types raised while decoding or encoding WAV data.

Every error carries a short ``kind`` identifier naming the structural
expectation that failed, so callers can branch on it or show it to users.
"""

from __future__ import annotations


class WavError(ValueError):
    kind = "WavError"


class WavDecodeError(WavError):
    kind = "DecodeError"


class WavEncodeError(WavError):
    kind = "EncodeError"


class NotRiffError(WavDecodeError):
    kind = "NotRiff"


class NotWaveError(WavDecodeError):
    kind = "NotWave"


class FormatChunkMissingError(WavDecodeError):
    kind = "FormatChunkMissing"


class FormatChunkWrongSizeError(WavDecodeError):
    kind = "FormatChunkWrongSize"


class NotPcmError(WavDecodeError):
    kind = "NotPcm"


class InconsistentFormatChunkError(WavDecodeError):
    kind = "InconsistentFormatChunk"


class DataChunkNotFoundError(WavDecodeError):
    kind = "DataChunkNotFound"


class UnexpectedEofError(WavDecodeError):
    kind = "UnexpectedEof"


class UnsupportedChannelCountError(WavDecodeError, WavEncodeError):
    kind = "UnsupportedChannelCount"


class InvalidChannelDataError(WavEncodeError):
    kind = "InvalidChannelData"


class SampleOutOfRangeError(WavEncodeError):
    kind = "SampleOutOfRange"


class InvalidSampleRateError(WavEncodeError):
    kind = "InvalidSampleRate"


class DataTooLargeError(WavEncodeError):
    kind = "DataTooLarge"
