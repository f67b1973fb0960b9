"""Stream conversion wrappers for sampledsignals."""
from sampledsignals.wrappers.base import SinkWrapper
from sampledsignals.wrappers.reformat import ReformatSink
from sampledsignals.wrappers.mix import UpMixSink, DownMixSink
from sampledsignals.wrappers.resample import ResampleSink, ResampleSource

__all__ = [
    "SinkWrapper",
    "ReformatSink",
    "UpMixSink",
    "DownMixSink",
    "ResampleSink",
    "ResampleSource",
]
