"""Audio file endpoints for sampledsignals."""
from sampledsignals.io.files import (
    AudioFileInfo,
    SoundFileSink,
    SoundFileSource,
    file_info,
    format_for_subtype,
)

__all__ = ["AudioFileInfo", "SoundFileSink", "SoundFileSource", "file_info", "format_for_subtype"]
