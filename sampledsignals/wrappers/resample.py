"""Sample rate conversion wrappers.

``ResampleSink`` keeps its resampler state between calls, so a stream can be
written in blocks of any size and produce the same frames as a single write.
``ResampleSource`` does the same on the reading side by pushing the wrapped
source through a ``ResampleSink`` into an in-memory queue.
"""

import logging
from fractions import Fraction

import numpy as np

from sampledsignals.config.models import ResampleOptions
from sampledsignals.constants import DEFAULT_BLOCK_SIZE
from sampledsignals.formats import SampleFormat, get_converter
from sampledsignals.resamplers import Resampler, get_resampler, reduce_ratio
from sampledsignals.streams.base import check_block
from sampledsignals.streams.memory import CollectingSink
from sampledsignals.streams.protocols import SampleSink, SampleSource
from sampledsignals.wrappers.base import SinkWrapper

logger = logging.getLogger(__name__)


class ResampleSink(SinkWrapper):
    """Accept frames at ``target_rate`` and write them at the wrapped sink's rate.

    Args:
        sink: Sink receiving the resampled frames
        target_rate: Rate of the frames written to this wrapper
        block_size: Output frames rendered per chunk
        options: Resampler method and quality settings
    """

    def __init__(
        self,
        sink: SampleSink,
        target_rate: float,
        block_size: int = DEFAULT_BLOCK_SIZE,
        options: ResampleOptions | None = None,
    ) -> None:
        super().__init__(sink, block_size)
        self.options = options or ResampleOptions()
        self.target_rate = float(target_rate)
        ratio = reduce_ratio(sink.rate, self.target_rate, self.options.max_denominator)
        self.resampler: Resampler = get_resampler(
            self.options.method,
            ratio,
            sink.channels,
            half_length=self.options.half_length,
            kaiser_beta=self.options.kaiser_beta,
        )
        self._converter = get_converter(sink.format)
        logger.debug(
            f"ResampleSink {self.target_rate:g} Hz -> {sink.rate:g} Hz "
            f"(ratio {ratio}, {self.options.method.value})"
        )

    @property
    def rate(self) -> float:
        return self.target_rate

    @property
    def ratio(self) -> Fraction:
        return self.resampler.ratio

    @property
    def phase(self) -> Fraction:
        """Offset of the next output frame from the next input frame, in input frames."""
        return self.resampler.phase

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        """Resample ``count`` frames and forward them.

        Returns:
            Number of input frames consumed; below ``count`` only when the
            wrapped sink stopped accepting frames
        """
        check_block(self, buf, offset, count)
        if count == 0:
            return 0

        block = self._converter.to_float(buf[offset:offset + count])
        window = self.resampler.window(block)
        outputs = self.resampler.output_count(count)

        written = 0
        while written < outputs:
            n = min(self.block_size, outputs - written)
            self._scratch[:n] = self._converter.from_float(self.resampler.render(window, written, n))
            accepted = self.sink.write_from(self._scratch, 0, n)
            written += accepted
            if accepted < n:
                consumed = self.resampler.consumed(written, count)
                history = len(window) - count
                self.resampler.advance(window[:history + consumed], consumed, written)
                logger.debug(f"Resampled sink full after {written} frames; consumed {consumed} of {count} input frames")
                return consumed

        self.resampler.advance(window, count, outputs)
        return count


class ResampleSource:
    """Present ``source`` at ``target_rate``.

    Reads pull blocks from the wrapped source until enough resampled frames
    are queued. A read comes back short once the wrapped source is exhausted
    and the queue has drained.
    """

    def __init__(
        self,
        source: SampleSource,
        target_rate: float,
        block_size: int = DEFAULT_BLOCK_SIZE,
        options: ResampleOptions | None = None,
    ) -> None:
        if block_size < 1:
            raise ValueError(f"Block size must be at least 1 frame, got {block_size}")
        self.source = source
        self.block_size = block_size
        self._queue = CollectingSink(target_rate, source.channels, source.format)
        self._resample = ResampleSink(self._queue, source.rate, block_size, options)
        self._scratch = np.zeros((block_size, source.channels), dtype=source.format.numpy_dtype)
        self._exhausted = False

    @property
    def rate(self) -> float:
        return self._queue.rate

    @property
    def channels(self) -> int:
        return self.source.channels

    @property
    def format(self) -> SampleFormat:
        return self.source.format

    @property
    def phase(self) -> Fraction:
        return self._resample.phase

    def read_into(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        while self._queue.pending < count and not self._exhausted:
            n = self.source.read_into(self._scratch, 0, self.block_size)
            self._resample.write_from(self._scratch, 0, n)
            if n < self.block_size:
                self._exhausted = True
        data = self._queue.take(count)
        buf[offset:offset + len(data)] = data
        return len(data)
