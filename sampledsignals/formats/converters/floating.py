"""Floating point format converters for sampledsignals."""

import numpy as np

from sampledsignals.formats.enums import SampleFormat


class Float32Converter:
    """Converter for 32-bit float samples."""

    format = SampleFormat.FLOAT32
    is_float = True

    @property
    def soundfile_subtype(self) -> str:
        return "FLOAT"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.float32)

    def to_float(self, data: np.ndarray) -> np.ndarray:
        return np.asarray(data).astype(np.float64, copy=False)

    def from_float(self, data: np.ndarray) -> np.ndarray:
        """Narrow to float32 (no clamping, floats carry their own range)."""
        return np.asarray(data).astype(np.float32, copy=False)


class Float64Converter:
    """Converter for 64-bit float samples."""

    format = SampleFormat.FLOAT64
    is_float = True

    @property
    def soundfile_subtype(self) -> str:
        return "DOUBLE"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.float64)

    def to_float(self, data: np.ndarray) -> np.ndarray:
        return np.asarray(data).astype(np.float64, copy=False)

    def from_float(self, data: np.ndarray) -> np.ndarray:
        return np.asarray(data).astype(np.float64, copy=False)


class Complex128Converter:
    """Converter for complex spectra.

    Spectra are never written to files, so there is no SoundFile subtype.
    """

    format = SampleFormat.COMPLEX128
    is_float = True

    @property
    def soundfile_subtype(self) -> None:
        return None

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.complex128)

    def to_float(self, data: np.ndarray) -> np.ndarray:
        # complex stays complex; the real and imaginary parts are already full scale
        return np.asarray(data).astype(np.complex128, copy=False)

    def from_float(self, data: np.ndarray) -> np.ndarray:
        return np.asarray(data).astype(np.complex128, copy=False)
