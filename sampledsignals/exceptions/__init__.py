"""Exception hierarchy for sampledsignals."""
from sampledsignals.exceptions.base import SampledSignalsError
from sampledsignals.exceptions.units import UnknownRateError, UnitKindError, RateMismatchError
from sampledsignals.exceptions.stream import (
    FormatMismatchError,
    UnsupportedChannelMappingError,
    ZeroChannelSourceError,
    AudioIOError,
)
from sampledsignals.exceptions.config import ConfigError, ConfigValidationError, YAMLConfigError

__all__ = [
    "SampledSignalsError",
    "UnknownRateError",
    "UnitKindError",
    "RateMismatchError",
    "FormatMismatchError",
    "UnsupportedChannelMappingError",
    "ZeroChannelSourceError",
    "AudioIOError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
]
