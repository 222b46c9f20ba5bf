"""Read and write 16-bit PCM RIFF/WAVE audio."""

from pcmwav.decoder import decode
from pcmwav.encoder import encode
from pcmwav.errors import (
    DataChunkNotFoundError,
    DataTooLargeError,
    FormatChunkMissingError,
    FormatChunkWrongSizeError,
    InconsistentFormatChunkError,
    InvalidChannelDataError,
    InvalidSampleRateError,
    NotPcmError,
    NotRiffError,
    NotWaveError,
    SampleOutOfRangeError,
    UnexpectedEofError,
    UnsupportedChannelCountError,
    WavDecodeError,
    WavEncodeError,
    WavError,
)
from pcmwav.format import ChannelLayout, DataBound
from pcmwav.record import AudioRecord
from pcmwav.wav import decode_from_path, encode_to_path

__version__ = "0.1.0"

__all__ = [
    "AudioRecord",
    "ChannelLayout",
    "DataBound",
    "DataChunkNotFoundError",
    "DataTooLargeError",
    "FormatChunkMissingError",
    "FormatChunkWrongSizeError",
    "InconsistentFormatChunkError",
    "InvalidChannelDataError",
    "InvalidSampleRateError",
    "NotPcmError",
    "NotRiffError",
    "NotWaveError",
    "SampleOutOfRangeError",
    "UnexpectedEofError",
    "UnsupportedChannelCountError",
    "WavDecodeError",
    "WavEncodeError",
    "WavError",
    "decode",
    "decode_from_path",
    "encode",
    "encode_to_path",
]
