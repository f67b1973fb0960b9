"""Channel up-mixing and down-mixing wrappers."""

import numpy as np

from sampledsignals.constants import DEFAULT_BLOCK_SIZE
from sampledsignals.exceptions import UnsupportedChannelMappingError, ZeroChannelSourceError
from sampledsignals.formats import get_converter
from sampledsignals.streams.base import check_block
from sampledsignals.streams.protocols import SampleSink
from sampledsignals.wrappers.base import SinkWrapper


class UpMixSink(SinkWrapper):
    """Present a mono sink in front of an N channel sink.

    Every mono frame is copied into all channels of the wrapped sink.
    """

    @property
    def channels(self) -> int:
        return 1

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        # (n, 1) broadcasts across every wrapped channel
        return self._forward(lambda chunk: chunk, buf, offset, count)


class DownMixSink(SinkWrapper):
    """Present an N channel sink in front of a mono sink.

    Channels are summed sample by sample in float64 and converted back with
    the format's saturation, so fixed-point sums clamp instead of wrapping.
    """

    def __init__(self, sink: SampleSink, channel_count: int, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if channel_count < 1:
            raise ZeroChannelSourceError(channel_count)
        if sink.channels != 1:
            raise UnsupportedChannelMappingError(channel_count, sink.channels)
        super().__init__(sink, block_size)
        self.channel_count = channel_count
        self._converter = get_converter(sink.format)

    @property
    def channels(self) -> int:
        return self.channel_count

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        return self._forward(self._mix, buf, offset, count)

    def _mix(self, chunk: np.ndarray) -> np.ndarray:
        summed = self._converter.to_float(chunk).sum(axis=1, keepdims=True)
        return self._converter.from_float(summed)
