from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AudioRecord:
    """Decoded 16-bit PCM audio: one list of int samples per channel."""

    sample_rate: int
    channels: list[list[int]] = field(default_factory=list)

    @property
    def channel_count(self) -> int:
        return len(self.channels)

    @property
    def frame_count(self) -> int:
        if not self.channels:
            return 0
        return min(len(samples) for samples in self.channels)

    @property
    def duration_s(self) -> float | None:
        if self.sample_rate <= 0:
            return None
        return float(self.frame_count) / float(self.sample_rate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sample_rate": self.sample_rate,
            "channel_count": self.channel_count,
            "frame_count": self.frame_count,
            "duration_s": self.duration_s,
        }
