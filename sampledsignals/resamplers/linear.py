"""Linear interpolation resampler."""

import numpy as np

from sampledsignals.resamplers.base import StreamingResampler


class LinearResampler(StreamingResampler):
    """Interpolate linearly between the two input frames around each output position.

    Only the last input frame is carried between blocks. Output frame ``k``
    needs input frame ``ceil(k * down / up)``, so after ``N`` input frames the
    outputs ``0 .. floor((N - 1) * up / down)`` are available.
    """

    history_frames = 1

    def _end(self, total_in: int) -> int:
        if total_in <= 0:
            return 0
        return (total_in - 1) * self.up // self.down + 1

    def render(self, window: np.ndarray, start: int, count: int) -> np.ndarray:
        index, phase = self._positions(start, count)
        frac = (phase / self.up)[:, np.newaxis]
        # an exact hit on the newest frame has frac == 0 and no right neighbour
        right = np.minimum(index + 1, len(window) - 1)
        return window[index] * (1.0 - frac) + window[right] * frac
