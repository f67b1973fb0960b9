"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on in-memory endpoints and fast execution.
"""

from __future__ import annotations

import numpy as np
import pytest

from sampledsignals.buffers import SampleBuf
from sampledsignals.formats import SampleFormat
from sampledsignals.streams import CollectingSink
from sampledsignals.streams.base import check_block


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Test Endpoints
# =============================================================================

class BlockedSource:
    """Source that hands out at most ``block_size`` frames per read and records requests."""

    def __init__(self, data: np.ndarray, rate: float, block_size: int) -> None:
        self.data = data
        self._rate = rate
        self._block_size = block_size
        self.position = 0
        self.requests: list[int] = []

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def channels(self) -> int:
        return self.data.shape[1]

    @property
    def format(self) -> SampleFormat:
        return SampleFormat.from_dtype(self.data.dtype)

    @property
    def block_size(self) -> int:
        return self._block_size

    def read_into(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        self.requests.append(count)
        n = min(count, self._block_size, len(self.data) - self.position)
        buf[offset:offset + n] = self.data[self.position:self.position + n]
        self.position += n
        return n


class LimitedSink(CollectingSink):
    """Collecting sink that stops accepting frames after ``capacity`` frames."""

    def __init__(self, rate: float, channels: int, fmt: SampleFormat, capacity: int) -> None:
        super().__init__(rate, channels, fmt)
        self.capacity = capacity

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        n = max(0, min(count, self.capacity - self.pending))
        return super().write_from(buf, offset, n)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def ramp_factory():
    """Factory fixture for ramp buffers where ``buf[i, ch] == i * (ch + 1)``.

    Returns:
        Callable that creates a ``SampleBuf`` ramp.

    Example:
        >>> buf = ramp_factory(frames=4, channels=2)
        >>> assert buf.data[3, 1] == 6
    """
    def _create(
        frames: int = 64,
        rate: float = 48000.0,
        channels: int = 1,
        dtype: type = np.float64,
    ) -> SampleBuf:
        index = np.arange(frames, dtype=np.float64)[:, np.newaxis]
        scale = np.arange(1, channels + 1, dtype=np.float64)[np.newaxis, :]
        return SampleBuf((index * scale).astype(dtype), rate)

    return _create


@pytest.fixture
def blocked_source_factory():
    """Factory fixture for ``BlockedSource`` instances."""
    def _create(data: np.ndarray, rate: float = 48.0, block_size: int = 16) -> BlockedSource:
        return BlockedSource(data, rate, block_size)

    return _create


@pytest.fixture
def limited_sink_factory():
    """Factory fixture for ``LimitedSink`` instances."""
    def _create(
        capacity: int,
        rate: float = 48000.0,
        channels: int = 1,
        fmt: SampleFormat = SampleFormat.FLOAT64,
    ) -> LimitedSink:
        return LimitedSink(rate, channels, fmt, capacity)

    return _create
