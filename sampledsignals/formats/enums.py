"""Sample format enums for sampledsignals."""

from enum import Enum

import numpy as np


class SampleFormat(str, Enum):
    """Element types a buffer or stream endpoint can carry.

    Fixed-point members are fractional: ``PCM16`` stores Q0.15 values in
    ``int16`` so its representable range is ``[-1.0, 32767/32768]``.
    ``PCM24`` keeps Q0.23 values in ``int32`` storage.
    """

    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX128 = "complex128"
    PCM16 = "pcm16"
    PCM24 = "pcm24"
    PCM32 = "pcm32"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the NumPy storage dtype for this format."""
        return np.dtype(_STORAGE[self])

    @classmethod
    def from_dtype(cls, dtype: np.dtype | type | str) -> "SampleFormat":
        """Infer the format of an array from its dtype.

        ``int32`` maps to ``PCM32``; 24-bit data must be tagged explicitly.

        Raises:
            ValueError: If the dtype has no matching sample format
        """
        dtype = np.dtype(dtype)
        for fmt in (cls.FLOAT32, cls.FLOAT64, cls.COMPLEX128, cls.PCM16, cls.PCM32):
            if np.dtype(_STORAGE[fmt]) == dtype:
                return fmt
        raise ValueError(f"No sample format for dtype {dtype}")

    @classmethod
    def promote_dtype(cls, dtype: np.dtype | type | str) -> "SampleFormat":
        """Return the format that can hold plain numbers of ``dtype``.

        Dtypes with a matching format map to it. Other integer, boolean and
        floating dtypes hold ordinary values rather than fractional samples,
        so they promote to ``FLOAT64``; complex dtypes promote to
        ``COMPLEX128``.

        Raises:
            ValueError: If the dtype is not numeric
        """
        dtype = np.dtype(dtype)
        try:
            return cls.from_dtype(dtype)
        except ValueError:
            pass
        if dtype.kind in "biuf":
            return cls.FLOAT64
        if dtype.kind == "c":
            return cls.COMPLEX128
        raise ValueError(f"No sample format for dtype {dtype}")


_STORAGE: dict[SampleFormat, str] = {
    SampleFormat.FLOAT32: "float32",
    SampleFormat.FLOAT64: "float64",
    SampleFormat.COMPLEX128: "complex128",
    SampleFormat.PCM16: "int16",
    SampleFormat.PCM24: "int32",
    SampleFormat.PCM32: "int32",
}
