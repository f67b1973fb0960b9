"""Shared state handling for streaming resamplers."""

from fractions import Fraction

import numpy as np


class StreamingResampler:
    """Integer bookkeeping common to every streaming resampler.

    The rate ratio ``out / in`` is held as ``up / down`` in lowest terms.
    Output frame ``k`` sits at input position ``k * down / up``. The state is
    the number of input frames committed so far, the index of the next output
    frame and the last ``history_frames`` input frames, so positions are exact
    and no floating point phase drifts between calls.
    """

    history_frames = 1

    def __init__(self, ratio: Fraction, channels: int) -> None:
        ratio = Fraction(ratio)
        if ratio <= 0:
            raise ValueError(f"Resampling ratio must be positive, got {ratio}")
        if channels < 1:
            raise ValueError(f"Resampler needs at least one channel, got {channels}")
        self.up = ratio.numerator
        self.down = ratio.denominator
        self.channels = channels
        self.reset()

    @property
    def ratio(self) -> Fraction:
        return Fraction(self.up, self.down)

    @property
    def phase(self) -> Fraction:
        return Fraction(self._next_out * self.down, self.up) - self._frames_in

    def reset(self) -> None:
        self._history = np.zeros((self.history_frames, self.channels))
        self._frames_in = 0
        self._next_out = 0

    def window(self, block: np.ndarray) -> np.ndarray:
        return np.concatenate([self._history, block], axis=0)

    def output_count(self, count: int) -> int:
        return max(0, self._end(self._frames_in + count) - self._next_out)

    def consumed(self, outputs: int, count: int) -> int:
        """Return how many frames of a ``count`` frame block are done with.

        Only ``outputs`` of the block's outputs were delivered. The next output
        sits at position ``p``; every frame it or any later output reads is at
        or after ``floor(p) - history_frames + 1``. Frames before ``floor(p)``
        are reported as consumed, so the history kept by ``advance`` together
        with a block resumed at ``offset + consumed`` covers that range.
        """
        whole = (self._next_out + outputs) * self.down // self.up
        return min(count, max(0, whole - self._frames_in))

    def advance(self, window: np.ndarray, count: int, outputs: int) -> None:
        self._history = window[-self.history_frames:].copy()
        self._frames_in += count
        self._next_out += outputs

    def _end(self, total_in: int) -> int:
        """Index one past the last output computable from ``total_in`` input frames."""
        raise NotImplementedError

    def _positions(self, start: int, count: int) -> tuple[np.ndarray, np.ndarray]:
        """Return window indices of ``floor(position)`` and the sub-frame phases.

        Phases are integers in ``[0, up)``; the fractional position is
        ``phase / up``.
        """
        base = (self._next_out + start) * self.down
        whole, rem = divmod(base, self.up)
        rel = rem + np.arange(count, dtype=np.int64) * self.down
        offset = whole - self._frames_in + self.history_frames
        return offset + rel // self.up, rel % self.up
