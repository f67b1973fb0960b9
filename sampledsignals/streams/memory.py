"""In-memory stream endpoints backed by NumPy arrays."""

from collections import deque

import numpy as np

from sampledsignals.buffers import SampleBuf
from sampledsignals.formats import SampleFormat
from sampledsignals.streams.base import check_block


class BufferSource:
    """Source that plays a ``SampleBuf`` from start to end.

    Reads past the end come back short, which ends any stream copy.
    """

    def __init__(self, buf: SampleBuf, block_size: int = 0) -> None:
        self.buf = buf
        self.position = 0
        self._block_size = block_size

    @property
    def rate(self) -> float:
        return self.buf.rate

    @property
    def channels(self) -> int:
        return self.buf.nchannels

    @property
    def format(self) -> SampleFormat:
        return self.buf.format

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def remaining(self) -> int:
        return self.buf.nframes - self.position

    def read_into(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        n = min(count, self.remaining)
        buf[offset:offset + n] = self.buf.data[self.position:self.position + n]
        self.position += n
        return n


class BufferSink:
    """Sink that fills a ``SampleBuf`` from start to end.

    Once the buffer is full, writes come back short.
    """

    def __init__(self, buf: SampleBuf) -> None:
        self.buf = buf
        self.position = 0

    @property
    def rate(self) -> float:
        return self.buf.rate

    @property
    def channels(self) -> int:
        return self.buf.nchannels

    @property
    def format(self) -> SampleFormat:
        return self.buf.format

    @property
    def remaining(self) -> int:
        return self.buf.nframes - self.position

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        n = min(count, self.remaining)
        self.buf.data[self.position:self.position + n] = buf[offset:offset + n]
        self.position += n
        return n


class CollectingSink:
    """Unbounded sink that queues every block written to it.

    Frames can be drained in order with ``take`` or copied out with
    ``to_buffer``.
    """

    def __init__(self, rate: float, channels: int, fmt: SampleFormat) -> None:
        self._rate = float(rate)
        self._channels = channels
        self._format = SampleFormat(fmt)
        self._blocks: deque[np.ndarray] = deque()
        self._pending = 0

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def format(self) -> SampleFormat:
        return self._format

    @property
    def pending(self) -> int:
        """Number of frames written and not yet taken."""
        return self._pending

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        if count:
            self._blocks.append(buf[offset:offset + count].copy())
            self._pending += count
        return count

    def take(self, count: int) -> np.ndarray:
        """Remove and return up to ``count`` of the oldest frames."""
        pieces = []
        needed = min(count, self._pending)
        while needed > 0:
            block = self._blocks[0]
            if len(block) <= needed:
                pieces.append(self._blocks.popleft())
                needed -= len(block)
            else:
                pieces.append(block[:needed])
                self._blocks[0] = block[needed:]
                needed = 0
        data = self._join(pieces)
        self._pending -= len(data)
        return data

    def to_buffer(self) -> SampleBuf:
        """Return every pending frame as a new buffer without draining the queue."""
        return SampleBuf(self._join(list(self._blocks)), self._rate, self._format)

    def _join(self, pieces: list[np.ndarray]) -> np.ndarray:
        if not pieces:
            return np.zeros((0, self._channels), dtype=self._format.numpy_dtype)
        return np.concatenate(pieces, axis=0)
