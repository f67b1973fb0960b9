"""Source and sink protocols for sampledsignals.

Any producer or consumer of frames (in-memory buffers, audio files, a device
backend) takes part in stream conversion by implementing one of these
protocols. Blocks are plain ``(frames, channels)`` NumPy arrays whose dtype
is the storage dtype of the endpoint's ``format``.
"""

from typing import Protocol, runtime_checkable

import numpy as np

from sampledsignals.formats import SampleFormat


@runtime_checkable
class SampleSource(Protocol):
    """Protocol for streaming endpoints that produce frames."""

    @property
    def rate(self) -> float:
        """Sample rate in Hz."""
        ...

    @property
    def channels(self) -> int:
        """Number of channels in every frame."""
        ...

    @property
    def format(self) -> SampleFormat:
        """Element format of the produced samples."""
        ...

    @property
    def block_size(self) -> int:
        """Preferred number of frames per read, or 0 for no preference."""
        ...

    def read_into(self, buf: np.ndarray, offset: int, count: int) -> int:
        """Fill ``buf[offset:offset + count]`` and return the number of frames filled.

        A return value below ``count`` signals that the source is exhausted.
        """
        ...


@runtime_checkable
class SampleSink(Protocol):
    """Protocol for streaming endpoints that consume frames."""

    @property
    def rate(self) -> float:
        """Sample rate in Hz."""
        ...

    @property
    def channels(self) -> int:
        """Number of channels in every frame."""
        ...

    @property
    def format(self) -> SampleFormat:
        """Element format of the accepted samples."""
        ...

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        """Consume ``buf[offset:offset + count]`` and return the number of frames accepted.

        A return value below ``count`` signals that the sink accepts no more.
        """
        ...
