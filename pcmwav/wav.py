"""File-level helpers: read/write WAV files through the in-memory codec."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence, Union

from pcmwav.decoder import decode
from pcmwav.encoder import encode
from pcmwav.format import DataBound
from pcmwav.record import AudioRecord


logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def decode_from_path(
    path: PathLike, *, data_bound: Union[DataBound, str] = DataBound.LENGTH
) -> AudioRecord:
    """Read the whole file in one go and decode it."""
    data = Path(path).read_bytes()
    logger.debug("Read %d bytes from %s", len(data), path)
    return decode(data, data_bound=data_bound)


def _atomic_write(path: Path, content: bytes) -> None:
    tmp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    try:
        tmp_path.write_bytes(content)
        os.replace(tmp_path, path)
    finally:
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass


def encode_to_path(channels: Sequence[Sequence[int]], sample_rate: int, path: PathLike) -> None:
    """Encode in memory, then replace `path` atomically.

    Nothing is written when encoding fails, and a failed write never leaves a
    partial file at `path`.
    """
    content = encode(channels, sample_rate)
    _atomic_write(Path(path), content)
    logger.debug("Wrote %d bytes to %s", len(content), path)

