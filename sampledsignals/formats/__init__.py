"""Sample formats for sampledsignals."""
from sampledsignals.formats.enums import SampleFormat
from sampledsignals.formats.converters import FormatConverter, get_converter, convert_samples

__all__ = ["SampleFormat", "FormatConverter", "get_converter", "convert_samples"]
