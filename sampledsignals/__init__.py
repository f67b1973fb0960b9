"""Sample-rate aware buffers and streams with automatic conversion."""
from sampledsignals.constants import VERSION, DEFAULT_BLOCK_SIZE
from sampledsignals.units import Quantity, Unit, seconds, ms, hz, khz, frames, frames_from, hz_from, seconds_from
from sampledsignals.formats import SampleFormat
from sampledsignals.buffers import SampleBuf, SpectrumBuf, fft, ifft
from sampledsignals.streams import SampleSource, SampleSink, BufferSource, BufferSink, CollectingSink
from sampledsignals.wrappers import ReformatSink, ResampleSink, ResampleSource, UpMixSink, DownMixSink
from sampledsignals.orchestrator import write, read, read_into
from sampledsignals.config import ResampleOptions
from sampledsignals.resamplers import ResampleMethod

__version__ = VERSION

__all__ = [
    "DEFAULT_BLOCK_SIZE",
    "Quantity",
    "Unit",
    "seconds",
    "ms",
    "hz",
    "khz",
    "frames",
    "frames_from",
    "hz_from",
    "seconds_from",
    "SampleFormat",
    "SampleBuf",
    "SpectrumBuf",
    "fft",
    "ifft",
    "SampleSource",
    "SampleSink",
    "BufferSource",
    "BufferSink",
    "CollectingSink",
    "ReformatSink",
    "ResampleSink",
    "ResampleSource",
    "UpMixSink",
    "DownMixSink",
    "write",
    "read",
    "read_into",
    "ResampleOptions",
    "ResampleMethod",
]
