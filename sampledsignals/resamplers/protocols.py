"""Resampler protocols for sampledsignals."""

from fractions import Fraction
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Resampler(Protocol):
    """Protocol for stateful streaming rate converters.

    A resampler sees its input one block at a time. For each block the caller
    builds a ``window`` (carried history followed by the new frames), asks how
    many output frames the block completes, renders them in chunks and finally
    commits the block with ``advance``. State only changes in ``advance``, so
    a block split at any frame boundary produces exactly the same output.
    """

    @property
    def ratio(self) -> Fraction:
        """Output rate divided by input rate, in lowest terms."""
        ...

    @property
    def phase(self) -> Fraction:
        """Position of the next output frame relative to the next unread input frame."""
        ...

    def window(self, block: np.ndarray) -> np.ndarray:
        """Prepend the carried history to a float block of new input frames."""
        ...

    def output_count(self, count: int) -> int:
        """Number of output frames completed by ``count`` more input frames."""
        ...

    def render(self, window: np.ndarray, start: int, count: int) -> np.ndarray:
        """Compute output frames ``start .. start + count - 1`` of the pending block."""
        ...

    def consumed(self, outputs: int, count: int) -> int:
        """Input frames of a ``count`` frame block that the next output no longer needs resent."""
        ...

    def advance(self, window: np.ndarray, count: int, outputs: int) -> None:
        """Commit a block of ``count`` input frames that produced ``outputs`` frames."""
        ...

    def reset(self) -> None:
        """Forget all history, as if no frame had been seen."""
        ...
