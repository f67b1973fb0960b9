"""Format converter protocols for sampledsignals."""

from typing import Protocol, runtime_checkable

import numpy as np

from sampledsignals.formats.enums import SampleFormat


@runtime_checkable
class FormatConverter(Protocol):
    """Protocol for converting samples to and from a common float representation.

    Every format maps onto float64 values where full scale is ``[-1.0, 1.0)``.
    Converting between two formats is ``dst.from_float(src.to_float(x))``.
    """

    @property
    def format(self) -> SampleFormat:
        """Return the sample format handled by this converter."""
        ...

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the NumPy storage dtype for this format."""
        ...

    @property
    def soundfile_subtype(self) -> str | None:
        """Return the SoundFile subtype string, or None if not writable to files."""
        ...

    @property
    def is_float(self) -> bool:
        """Return True for floating point (and complex) formats."""
        ...

    def to_float(self, data: np.ndarray) -> np.ndarray:
        """Convert stored samples to float64 full-scale values."""
        ...

    def from_float(self, data: np.ndarray) -> np.ndarray:
        """Convert float values to stored samples, saturating where needed."""
        ...
