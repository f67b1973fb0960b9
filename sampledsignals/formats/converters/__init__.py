"""Sample format conversion strategies."""
from sampledsignals.formats.converters.protocols import FormatConverter
from sampledsignals.formats.converters.factory import get_converter, convert_samples

__all__ = ["FormatConverter", "get_converter", "convert_samples"]
