"""Rate-tagged sample buffers for sampledsignals."""

import operator
from typing import Callable, Self

import numpy as np

from sampledsignals.exceptions import FormatMismatchError, RateMismatchError
from sampledsignals.formats import SampleFormat, get_converter
from sampledsignals.units import QuantityLike, frames_from, rates_equal


class _SignalBuffer:
    """Fixed-size ``(frames x channels)`` array tagged with a rate and a format.

    Samples are stored frame-major: ``data[frame, channel]``. Integer and
    slice indices select frames; a tuple addresses ``(frame, channel)``.
    ``linear_index`` maps a channel-major linear index (every frame of the
    first channel, then the second, ...) onto that layout.
    """

    # let ndarray operands defer to our reflected operators
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: np.ndarray, rate: float, fmt: SampleFormat | None = None) -> None:
        """Wrap ``data`` without copying it.

        Arrays whose dtype has no sample format (``int64`` from a plain
        ``np.array([1, 2, 3])``, say) are copied into ``FLOAT64`` or
        ``COMPLEX128`` storage with their values unchanged.

        Args:
            data: 1-D (mono) or 2-D ``(frames, channels)`` array
            rate: Sample rate in Hz, or seconds per bin for spectra
            fmt: Sample format; inferred from the dtype when omitted

        Raises:
            ValueError: If the array shape or rate is invalid
            FormatMismatchError: If ``fmt`` does not match the array dtype
        """
        arr = np.asarray(data)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        elif arr.ndim != 2:
            raise ValueError(f"Sample data must be 1-D or 2-D, got {arr.ndim} dimensions")
        if arr.shape[1] < 1:
            raise ValueError("Sample data must have at least one channel")

        if fmt is None:
            fmt = SampleFormat.promote_dtype(arr.dtype)
            arr = arr.astype(fmt.numpy_dtype, copy=False)
        else:
            fmt = SampleFormat(fmt)
            if arr.dtype != fmt.numpy_dtype:
                raise FormatMismatchError(
                    f"Array dtype {arr.dtype} does not match format {fmt} ({fmt.numpy_dtype})"
                )

        self.data = arr
        self.format = fmt
        self._rate = _checked_rate(rate)

    @classmethod
    def zeros(cls, fmt: SampleFormat, rate: float, frames: QuantityLike, channels: int = 1) -> Self:
        """Allocate a zero-filled buffer.

        Args:
            fmt: Sample format of the new buffer
            rate: Sample rate of the new buffer
            frames: Length as a frame count or a quantity convertible with ``rate``
            channels: Number of channels
        """
        fmt = SampleFormat(fmt)
        if channels < 1:
            raise ValueError(f"A buffer needs at least one channel, got {channels}")
        nframes = frames_from(frames, rate)
        return cls(np.zeros((nframes, channels), dtype=fmt.numpy_dtype), rate, fmt)

    @property
    def rate(self) -> float:
        return self._rate

    @rate.setter
    def rate(self, value: float) -> None:
        self._rate = _checked_rate(value)

    @property
    def nframes(self) -> int:
        return self.data.shape[0]

    @property
    def nchannels(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.data.shape

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    def linear_index(self, index: int) -> tuple[int, int]:
        """Return the ``(frame, channel)`` addressed by a channel-major linear index."""
        if not 0 <= index < self.data.size:
            raise IndexError(f"Linear index {index} out of range for {self.data.size} samples")
        channel, frame = divmod(index, self.nframes)
        return frame, channel

    def copy(self) -> Self:
        return type(self)(self.data.copy(), self.rate, self.format)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.asarray(self.data, dtype=dtype)

    def __len__(self) -> int:
        return self.nframes

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self.data[index], self.rate, self.format)
        return self.data[index]

    def __setitem__(self, index, value) -> None:
        self.data[index] = np.asarray(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _SignalBuffer):
            return NotImplemented
        return (
            type(self) is type(other)
            and rates_equal(self.rate, other.rate)
            and self.shape == other.shape
            and bool(np.array_equal(self.data, other.data))
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.nframes} frames, {self.nchannels} channels, "
            f"rate={self.rate:g}, format={self.format.value})"
        )

    def _binary(self, other: object, op: Callable[[np.ndarray, object], np.ndarray]) -> Self:
        if isinstance(other, _SignalBuffer):
            if type(other) is not type(self) or not rates_equal(self.rate, other.rate):
                raise RateMismatchError(self.rate, other.rate)
            other = other.data
        result = np.asarray(op(self.data, other))
        converter = get_converter(self.format)
        if not converter.is_float and result.dtype.kind in "biu":
            # integer results stay in the buffer's own fixed-point format
            result = np.clip(result, converter.minimum, converter.maximum).astype(converter.numpy_dtype)
            return type(self)(result, self.rate, self.format)
        fmt = self.format if result.dtype == self.format.numpy_dtype else None
        return type(self)(result, self.rate, fmt)

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __radd__(self, other):
        return self._binary(other, lambda a, b: b + a)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __rsub__(self, other):
        return self._binary(other, lambda a, b: b - a)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        return self._binary(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._binary(other, lambda a, b: b / a)

    def __neg__(self):
        return type(self)(-self.data, self.rate, self.format)


class SampleBuf(_SignalBuffer):
    """A time-domain signal; ``rate`` is in Hz."""

    @property
    def duration(self) -> float:
        """Length of the buffer in seconds."""
        return self.nframes / self.rate


class SpectrumBuf(_SignalBuffer):
    """A frequency-domain signal; ``rate`` is in seconds per bin."""

    @property
    def bin_hz(self) -> float:
        """Spacing between adjacent bins in Hz."""
        return 1.0 / self.rate


def _checked_rate(rate: float) -> float:
    rate = float(rate)
    if not rate > 0:
        raise ValueError(f"Rate must be positive, got {rate}")
    return rate
