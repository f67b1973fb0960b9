"""Stream endpoints for sampledsignals."""
from sampledsignals.streams.protocols import SampleSource, SampleSink
from sampledsignals.streams.base import EndpointFormat, format_of, check_block
from sampledsignals.streams.memory import BufferSource, BufferSink, CollectingSink

__all__ = [
    "SampleSource",
    "SampleSink",
    "EndpointFormat",
    "format_of",
    "check_block",
    "BufferSource",
    "BufferSink",
    "CollectingSink",
]
