"""Audio file endpoints backed by soundfile (libsndfile)."""

import logging
from pathlib import Path
from typing import NamedTuple

import numpy as np
import soundfile as sf

from sampledsignals.exceptions import AudioIOError
from sampledsignals.formats import SampleFormat, get_converter
from sampledsignals.streams.base import check_block

logger = logging.getLogger(__name__)

# 24-bit files are read left-justified in int32, which is exactly Q0.31
_SUBTYPE_FORMATS = {
    "PCM_16": SampleFormat.PCM16,
    "PCM_24": SampleFormat.PCM32,
    "PCM_32": SampleFormat.PCM32,
    "DOUBLE": SampleFormat.FLOAT64,
}


class AudioFileInfo(NamedTuple):
    """Audio file information."""
    rate: float
    channels: int
    format: SampleFormat
    frames: int
    subtype: str

    @property
    def duration(self) -> float:
        return self.frames / self.rate


def format_for_subtype(subtype: str) -> SampleFormat:
    """Return the sample format used to read a file of the given subtype."""
    return _SUBTYPE_FORMATS.get(subtype, SampleFormat.FLOAT32)


def file_info(path: Path) -> AudioFileInfo:
    """Get audio information for a file.

    Raises:
        AudioIOError: If soundfile cannot read the file header
    """
    try:
        info = sf.info(str(path))
    except (RuntimeError, OSError) as e:
        raise AudioIOError(f"Failed to read audio file {path}: {e}") from e
    return AudioFileInfo(
        rate=float(info.samplerate),
        channels=info.channels,
        format=format_for_subtype(info.subtype),
        frames=info.frames,
        subtype=info.subtype,
    )


class SoundFileSource:
    """Source reading frames from an audio file.

    The sample format follows the file's subtype, so integer files are read
    without a round trip through float.
    """

    def __init__(self, path: Path, block_size: int = 0) -> None:
        self.path = Path(path)
        try:
            self._file = sf.SoundFile(str(self.path))
        except (RuntimeError, OSError) as e:
            raise AudioIOError(f"Failed to open audio file {self.path}: {e}") from e
        self._format = format_for_subtype(self._file.subtype)
        self._block_size = block_size
        logger.debug(f"Opened {self.path} ({self._file.samplerate} Hz, {self._file.channels} ch, {self._file.subtype})")

    @property
    def rate(self) -> float:
        return float(self._file.samplerate)

    @property
    def channels(self) -> int:
        return self._file.channels

    @property
    def format(self) -> SampleFormat:
        return self._format

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def frames(self) -> int:
        """Total number of frames in the file."""
        return self._file.frames

    def read_into(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        try:
            data = self._file.read(out=buf[offset:offset + count])
        except (RuntimeError, OSError) as e:
            raise AudioIOError(f"Failed to read from {self.path}: {e}") from e
        return len(data)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "SoundFileSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class SoundFileSink:
    """Sink writing frames to an audio file.

    The file subtype matches ``fmt``; the container is picked by soundfile
    from the file extension.
    """

    def __init__(self, path: Path, rate: float, channels: int, fmt: SampleFormat = SampleFormat.FLOAT32) -> None:
        self.path = Path(path)
        self._format = SampleFormat(fmt)
        self._converter = get_converter(self._format)
        subtype = self._converter.soundfile_subtype
        if subtype is None:
            raise AudioIOError(f"Format {self._format.value} cannot be written to an audio file")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._file = sf.SoundFile(
                str(self.path), "w",
                samplerate=int(round(rate)),
                channels=channels,
                subtype=subtype,
            )
        except (RuntimeError, OSError, ValueError, TypeError) as e:
            raise AudioIOError(f"Failed to create audio file {self.path}: {e}") from e
        self._rate = float(rate)

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def channels(self) -> int:
        return self._file.channels

    @property
    def format(self) -> SampleFormat:
        return self._format

    def write_from(self, buf: np.ndarray, offset: int, count: int) -> int:
        check_block(self, buf, offset, count)
        data = buf[offset:offset + count]
        if self._format is SampleFormat.PCM24:
            # libsndfile expects left-justified int32; hand it floats instead
            data = self._converter.to_float(data)
        try:
            self._file.write(data)
        except (RuntimeError, OSError) as e:
            raise AudioIOError(f"Failed to write to {self.path}: {e}") from e
        return count

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "SoundFileSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
