from __future__ import annotations

import struct
from pathlib import Path
from typing import Callable, Optional

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep user config and env overrides out of every test."""
    config_home = tmp_path / "config"
    config_home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    # setenv first so values loaded from a dotenv file are undone at teardown.
    for name in ("PCMWAV_DATA_BOUND", "PCMWAV_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    import pcmwav.config

    monkeypatch.setattr(pcmwav.config, "_ENV_LOADED", False)
    return config_home


WavBuilder = Callable[..., bytes]


@pytest.fixture()
def build_wav() -> WavBuilder:
    """Assemble a WAV buffer field by field so tests can corrupt any part."""

    def _build(
        samples: bytes = b"",
        *,
        channels: int = 1,
        sample_rate: int = 8000,
        bits: int = 16,
        audio_format: int = 1,
        fmt_size: int = 16,
        byte_rate: Optional[int] = None,
        block_align: Optional[int] = None,
        riff_tag: bytes = b"RIFF",
        wave_tag: bytes = b"WAVE",
        fmt_tag: bytes = b"fmt ",
        data_size: Optional[int] = None,
        extra_chunks: bytes = b"",
        include_data: bool = True,
    ) -> bytes:
        if byte_rate is None:
            byte_rate = sample_rate * channels * bits // 8
        if block_align is None:
            block_align = channels * bits // 8
        if data_size is None:
            data_size = len(samples)

        fmt = struct.pack(
            "<HHIIHH", audio_format, channels, sample_rate, byte_rate, block_align, bits
        )
        body = fmt_tag + struct.pack("<I", fmt_size) + fmt + extra_chunks
        if include_data:
            body += b"data" + struct.pack("<I", data_size) + samples
        return riff_tag + struct.pack("<I", 4 + len(body)) + wave_tag + body

    return _build
