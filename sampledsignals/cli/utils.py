"""CLI utility functions for sampledsignals."""
from __future__ import annotations

from pathlib import Path

import numpy as np
from tqdm import tqdm

from sampledsignals.formats import SampleFormat
from sampledsignals.streams import SampleSource


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _format_duration(seconds: float) -> str:
    """Render a duration as ``H:MM:SS.mmm`` (hours omitted when zero)."""

    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:06.3f}"
    return f"{minutes}:{secs:06.3f}"


class ProgressSource:
    """Pass-through source that advances a tqdm bar by every frame read."""

    def __init__(self, source: SampleSource, progress: tqdm) -> None:
        self.source = source
        self.progress = progress

    @property
    def rate(self) -> float:
        return self.source.rate

    @property
    def channels(self) -> int:
        return self.source.channels

    @property
    def format(self) -> SampleFormat:
        return self.source.format

    @property
    def block_size(self) -> int:
        return self.source.block_size

    def read_into(self, buf: np.ndarray, offset: int, count: int) -> int:
        n = self.source.read_into(buf, offset, count)
        self.progress.update(n)
        return n
