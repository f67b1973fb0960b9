"""Stream and conversion exceptions for sampledsignals."""

from sampledsignals.exceptions.base import SampledSignalsError


class FormatMismatchError(SampledSignalsError):
    """Raised when a block transfer is attempted between mismatched formats.

    Endpoints never coerce data on their own; conversion is only inserted by
    the stream orchestrator.
    """


class UnsupportedChannelMappingError(SampledSignalsError):
    """Raised when no channel mapping exists between two endpoints.

    Only mono to N (up-mix) and N to mono (down-mix) are defined; a general
    M to N mapping with both sides above one channel is rejected before any
    frame is transferred.
    """

    def __init__(self, source_channels: int, sink_channels: int) -> None:
        super().__init__(
            f"Cannot map {source_channels} source channels onto {sink_channels} sink channels; "
            "only mono up-mixing and down-mixing to mono are supported."
        )
        self.source_channels = source_channels
        self.sink_channels = sink_channels


class ZeroChannelSourceError(SampledSignalsError):
    """Raised when a down-mix is built for a source without channels."""

    def __init__(self, channels: int) -> None:
        super().__init__(f"Cannot down-mix a source with {channels} channels.")
        self.channels = channels


class AudioIOError(SampledSignalsError):
    """Raised when a file backed endpoint fails to open, read or write.

    This exception is raised for issues such as:
    - Missing or corrupted audio files
    - Unsupported file formats or subtypes
    - File system errors during reading/writing
    """
