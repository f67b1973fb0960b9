"""Sample format conversion wrapper."""

import numpy as np

from sampledsignals.constants import DEFAULT_BLOCK_SIZE
from sampledsignals.formats import SampleFormat, convert_samples
from sampledsignals.streams.base import check_block
from sampledsignals.streams.protocols import SampleSink
from sampledsignals.wrappers.base import SinkWrapper


class ReformatSink(SinkWrapper):
    """Accept ``target_format`` samples and write them in the wrapped sink's format.

    Float to fixed-point conversion rounds to the nearest step and saturates
    at the integer limits.
    """

    def __init__(self, sink: SampleSink, target_format: SampleFormat, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        super().__init__(sink, block_size)
        self.target_format = SampleFormat(target_format)

    @property
    def format(self) -> SampleFormat:
        return self.target_format

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        return self._forward(self._convert, buf, offset, count)

    def _convert(self, chunk: np.ndarray) -> np.ndarray:
        return convert_samples(chunk, self.target_format, self.sink.format)
