"""Shared plumbing for sink wrappers."""

import logging
from typing import Callable

import numpy as np

from sampledsignals.constants import DEFAULT_BLOCK_SIZE
from sampledsignals.formats import SampleFormat
from sampledsignals.streams.protocols import SampleSink

logger = logging.getLogger(__name__)


class SinkWrapper:
    """Sink that converts frames one block at a time before passing them on.

    The wrapper owns a scratch buffer of ``block_size`` frames in the wrapped
    sink's channel count and format. By default it advertises the wrapped
    sink's rate, channels and format; subclasses override the one axis they
    convert.
    """

    def __init__(self, sink: SampleSink, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if block_size < 1:
            raise ValueError(f"Block size must be at least 1 frame, got {block_size}")
        self.sink = sink
        self.block_size = block_size
        self._scratch = np.zeros((block_size, sink.channels), dtype=sink.format.numpy_dtype)

    @property
    def rate(self) -> float:
        return self.sink.rate

    @property
    def channels(self) -> int:
        return self.sink.channels

    @property
    def format(self) -> SampleFormat:
        return self.sink.format

    def _forward(
        self,
        convert: Callable[[np.ndarray], np.ndarray],
        buf: np.ndarray,
        offset: int,
        count: int,
    ) -> int:
        """Convert ``buf[offset:offset + count]`` chunk by chunk into the wrapped sink.

        Returns:
            Number of frames the wrapped sink accepted
        """
        done = 0
        while done < count:
            n = min(self.block_size, count - done)
            self._scratch[:n] = convert(buf[offset + done:offset + done + n])
            written = self.sink.write_from(self._scratch, 0, n)
            done += written
            if written < n:
                logger.debug(f"{type(self).__name__}: wrapped sink accepted {written} of {n} frames")
                break
        return done
