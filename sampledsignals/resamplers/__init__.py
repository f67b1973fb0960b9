"""Streaming resamplers for sampledsignals."""
from sampledsignals.resamplers.enums import ResampleMethod
from sampledsignals.resamplers.protocols import Resampler
from sampledsignals.resamplers.linear import LinearResampler
from sampledsignals.resamplers.polyphase import PolyphaseResampler
from sampledsignals.resamplers.factory import get_resampler, reduce_ratio

__all__ = [
    "ResampleMethod",
    "Resampler",
    "LinearResampler",
    "PolyphaseResampler",
    "get_resampler",
    "reduce_ratio",
]
