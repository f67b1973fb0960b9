"""Polyphase FIR resampler."""

from fractions import Fraction

import numpy as np
from scipy import signal

from sampledsignals.resamplers.base import StreamingResampler


class PolyphaseResampler(StreamingResampler):
    """Rational resampler with a Kaiser-windowed FIR low-pass filter.

    Conceptually the input is upsampled by ``up`` with zero stuffing, low-pass
    filtered at ``min(rate_in, rate_out) / 2`` and decimated by ``down``. The
    filter is split into ``up`` phases so only the taps that meet non-zero
    samples are evaluated. The last ``taps_per_phase`` input frames are
    carried between blocks.

    The filter is causal: output is delayed by half the filter length,
    ``half_length * max(up, down) / up`` output frames.
    """

    def __init__(self, ratio: Fraction, channels: int, half_length: int = 16, kaiser_beta: float = 5.0) -> None:
        ratio = Fraction(ratio)
        up, down = ratio.numerator, ratio.denominator
        factor = max(up, down)
        if factor == 1:
            taps = np.ones(1)
        else:
            length = 2 * half_length * factor + 1
            # unity passband gain once the zero-stuffed input is filtered
            taps = signal.firwin(length, 1.0 / factor, window=("kaiser", kaiser_beta)) * up

        per_phase = -(-len(taps) // up)
        padded = np.zeros(per_phase * up)
        padded[:len(taps)] = taps
        # bank[p, t] = taps[p + t * up]
        self._bank = padded.reshape(per_phase, up).T.copy()
        self.history_frames = per_phase
        super().__init__(ratio, channels)

    @property
    def taps_per_phase(self) -> int:
        return self._bank.shape[1]

    def _end(self, total_in: int) -> int:
        return -(-total_in * self.up // self.down)

    def render(self, window: np.ndarray, start: int, count: int) -> np.ndarray:
        index, phase = self._positions(start, count)
        frames = window[index[:, np.newaxis] - np.arange(self.taps_per_phase)[np.newaxis, :]]
        return np.einsum("nt,ntc->nc", self._bank[phase], frames)
