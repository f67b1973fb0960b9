"""Fixed-point PCM format converters for sampledsignals."""

import numpy as np

from sampledsignals.formats.enums import SampleFormat


class FixedPointConverter:
    """Converter for fractional fixed-point samples stored in integers.

    A stored integer ``i`` represents ``i / scale``. Converting from float
    rounds to the nearest step and clamps to ``[minimum, maximum]`` so that
    out-of-range input saturates instead of wrapping around.
    """

    format: SampleFormat
    scale: float
    minimum: int
    maximum: int
    is_float = False

    @property
    def soundfile_subtype(self) -> str:
        return _SUBTYPES[self.format]

    @property
    def numpy_dtype(self) -> np.dtype:
        return self.format.numpy_dtype

    def to_float(self, data: np.ndarray) -> np.ndarray:
        return np.asarray(data).astype(np.float64) / self.scale

    def from_float(self, data: np.ndarray) -> np.ndarray:
        scaled = np.clip(np.rint(np.asarray(data, dtype=np.float64) * self.scale), self.minimum, self.maximum)
        return scaled.astype(self.numpy_dtype)


class Pcm16Converter(FixedPointConverter):
    """Converter for Q0.15 samples in int16: [-32768, 32767] / 2^15."""

    format = SampleFormat.PCM16
    scale = 32768.0
    minimum = -32768
    maximum = 32767


class Pcm24Converter(FixedPointConverter):
    """Converter for Q0.23 samples in int32 storage: [-2^23, 2^23-1] / 2^23."""

    format = SampleFormat.PCM24
    scale = 8388608.0
    minimum = -8388608
    maximum = 8388607


class Pcm32Converter(FixedPointConverter):
    """Converter for Q0.31 samples in int32: [-2^31, 2^31-1] / 2^31."""

    format = SampleFormat.PCM32
    scale = 2147483648.0
    minimum = -2147483648
    maximum = 2147483647


_SUBTYPES: dict[SampleFormat, str] = {
    SampleFormat.PCM16: "PCM_16",
    SampleFormat.PCM24: "PCM_24",
    SampleFormat.PCM32: "PCM_32",
}
