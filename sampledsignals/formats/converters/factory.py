"""Factory functions for format converters."""

from typing import cast

from sampledsignals.formats.enums import SampleFormat
from sampledsignals.formats.converters.protocols import FormatConverter
from sampledsignals.formats.converters.floating import Float32Converter, Float64Converter, Complex128Converter
from sampledsignals.formats.converters.fixed import Pcm16Converter, Pcm24Converter, Pcm32Converter

_CONVERTERS = {
    SampleFormat.FLOAT32: Float32Converter(),
    SampleFormat.FLOAT64: Float64Converter(),
    SampleFormat.COMPLEX128: Complex128Converter(),
    SampleFormat.PCM16: Pcm16Converter(),
    SampleFormat.PCM24: Pcm24Converter(),
    SampleFormat.PCM32: Pcm32Converter(),
}


def get_converter(fmt: SampleFormat) -> FormatConverter:
    """Factory function to get the converter for the given sample format.

    Args:
        fmt: The sample format

    Returns:
        FormatConverter: The converter instance (converters are stateless and shared)
    """
    return cast(FormatConverter, _CONVERTERS[SampleFormat(fmt)])


def convert_samples(data, source: SampleFormat, target: SampleFormat):
    """Convert ``data`` stored as ``source`` into ``target`` storage.

    Identical formats return the data unchanged.
    """
    if source is target:
        return data
    return get_converter(target).from_float(get_converter(source).to_float(data))
