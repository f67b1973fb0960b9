"""Copy frames from a source into a sink, converting on the way.

``write`` compares the rate, channel count and sample format of both
endpoints and wraps the sink in whatever conversion stages are needed:

    caller -> [UpMix | DownMix] -> [Resample] -> [Reformat] -> sink

It then moves frames block by block until the source runs dry, the sink
stops accepting frames or the requested amount has been copied.
"""

import logging

import numpy as np

from sampledsignals.buffers import SampleBuf
from sampledsignals.config.models import ResampleOptions
from sampledsignals.constants import DEFAULT_BLOCK_SIZE
from sampledsignals.exceptions import (
    UnitKindError,
    UnsupportedChannelMappingError,
    ZeroChannelSourceError,
)
from sampledsignals.streams import (
    BufferSink,
    BufferSource,
    CollectingSink,
    EndpointFormat,
    SampleSink,
    SampleSource,
    format_of,
)
from sampledsignals.units import Quantity, QuantityLike, Unit, UnitKind, frames_from, rates_equal
from sampledsignals.wrappers import DownMixSink, ReformatSink, ResampleSink, UpMixSink

logger = logging.getLogger(__name__)

type SourceLike = SampleSource | SampleBuf | np.ndarray


def check_channel_mapping(source_channels: int, sink_channels: int) -> None:
    """Reject channel layouts that no wrapper can bridge.

    Raises:
        ZeroChannelSourceError: If the source has no channels
        UnsupportedChannelMappingError: If both sides have more than one channel and differ
    """
    if source_channels < 1:
        raise ZeroChannelSourceError(source_channels)
    if source_channels != sink_channels and source_channels > 1 and sink_channels > 1:
        raise UnsupportedChannelMappingError(source_channels, sink_channels)


def wrap_sink(
    sink: SampleSink,
    source_format: EndpointFormat,
    *,
    block_size: int = DEFAULT_BLOCK_SIZE,
    resample: ResampleOptions | None = None,
) -> SampleSink:
    """Return ``sink`` wrapped so that it accepts frames in ``source_format``.

    The channel mapping is validated before any wrapper is built. Matching
    endpoints get the sink back unchanged.
    """
    sink_format = format_of(sink)
    check_channel_mapping(source_format.channels, sink_format.channels)

    wrapped = sink
    if sink_format.format is not source_format.format:
        logger.debug(f"Inserting ReformatSink {source_format.format.value} -> {sink_format.format.value}")
        wrapped = ReformatSink(wrapped, source_format.format, block_size)
    if not rates_equal(sink_format.rate, source_format.rate):
        logger.debug(f"Inserting ResampleSink {source_format.rate:g} Hz -> {sink_format.rate:g} Hz")
        wrapped = ResampleSink(wrapped, source_format.rate, block_size, resample)
    if sink_format.channels != source_format.channels:
        if sink_format.channels == 1:
            logger.debug(f"Inserting DownMixSink {source_format.channels} -> 1 channels")
            wrapped = DownMixSink(wrapped, source_format.channels, block_size)
        else:
            logger.debug(f"Inserting UpMixSink 1 -> {sink_format.channels} channels")
            wrapped = UpMixSink(wrapped, block_size)
    return wrapped


def write(
    sink: SampleSink,
    source: SourceLike,
    limit: QuantityLike | None = None,
    *,
    block_size: int | None = None,
    resample: ResampleOptions | None = None,
) -> QuantityLike:
    """Copy frames from ``source`` into ``sink``.

    Args:
        sink: Destination endpoint
        source: A source, a ``SampleBuf`` or a bare array (read at the sink's rate)
        limit: Maximum amount to copy, as a frame count or a time/frame quantity
            measured at the source's rate; ``None`` copies until the source or
            sink stops
        block_size: Frames per block; defaults to the source's preference,
            then ``DEFAULT_BLOCK_SIZE``
        resample: Resampler settings used when the rates differ

    Returns:
        ``limit`` itself when it was copied in full, otherwise the amount
        copied in the same unit (frames for ``None`` or a bare count)

    Raises:
        UnsupportedChannelMappingError: If the channel layouts cannot be bridged
        UnitKindError: If ``limit`` is a frequency
    """
    return _copy(sink, source, limit, block_size, resample, fills_sink=False)


def _copy(
    sink: SampleSink,
    source: SourceLike,
    limit: QuantityLike | None,
    block_size: int | None,
    resample: ResampleOptions | None,
    fills_sink: bool,
) -> QuantityLike:
    """Run the block loop of ``write``.

    ``fills_sink`` marks a sink whose short write is its normal end, so the
    frames left over are not reported as dropped.
    """
    if isinstance(source, np.ndarray):
        source = SampleBuf(source, sink.rate)
    if isinstance(source, SampleBuf):
        if limit is None:
            limit = source.nframes
        source = BufferSource(source)

    block = block_size or source.block_size or DEFAULT_BLOCK_SIZE
    if block < 1:
        raise ValueError(f"Block size must be at least 1 frame, got {block}")
    max_frames = _limit_frames(limit, source.rate)

    wrapped = wrap_sink(sink, format_of(source), block_size=block, resample=resample)
    scratch = np.zeros((block, source.channels), dtype=source.format.numpy_dtype)

    total = 0
    while max_frames is None or total < max_frames:
        n = block if max_frames is None else min(block, max_frames - total)
        got = source.read_into(scratch, 0, n)
        written = wrapped.write_from(scratch, 0, got) if got else 0
        total += written
        if written < got:
            if fills_sink:
                logger.debug(f"Buffer full after {total} frames")
            else:
                logger.warning(f"Sink stopped accepting frames; {got - written} frames read from the source were dropped")
            break
        if got < n:
            logger.debug(f"Source exhausted after {total} frames")
            break

    logger.debug(f"Copied {total} frames in blocks of {block}")
    return _result(limit, max_frames, total, source.rate)


def read_into(
    source: SourceLike,
    buf: SampleBuf,
    count: QuantityLike | None = None,
    *,
    block_size: int | None = None,
    resample: ResampleOptions | None = None,
) -> QuantityLike:
    """Read from ``source`` into ``buf``, converting to the buffer's format.

    ``count`` is measured at the source's rate and defaults to the buffer
    length when the rates match; otherwise reading stops when ``buf`` is full.
    """
    sink = BufferSink(buf)
    rate = source.rate if not isinstance(source, np.ndarray) else buf.rate
    if count is None and rates_equal(rate, buf.rate):
        count = buf.nframes
    return _copy(sink, source, count, block_size, resample, fills_sink=True)


def read(
    source: SampleSource,
    count: QuantityLike | None = None,
    *,
    block_size: int | None = None,
) -> SampleBuf:
    """Read from ``source`` into a new buffer in the source's own format.

    A short read returns a truncated buffer. Without ``count`` the source is
    read until it is exhausted.
    """
    if count is None:
        collected = CollectingSink(source.rate, source.channels, source.format)
        write(collected, source, block_size=block_size)
        return collected.to_buffer()

    nframes = frames_from(count, source.rate)
    buf = SampleBuf.zeros(source.format, source.rate, nframes, source.channels)
    got = write(BufferSink(buf), source, nframes, block_size=block_size)
    if got < nframes:
        return buf[:got]
    return buf


def _limit_frames(limit: QuantityLike | None, rate: float) -> int | None:
    if limit is None:
        return None
    if isinstance(limit, Quantity):
        if limit.kind is UnitKind.FREQUENCY:
            raise UnitKindError(limit, "seconds or frames")
        nframes = frames_from(limit, rate)
    else:
        nframes = int(round(limit))
    if nframes < 0:
        raise ValueError(f"Cannot copy a negative amount: {limit}")
    return nframes


def _result(limit: QuantityLike | None, max_frames: int | None, total: int, rate: float) -> QuantityLike:
    if max_frames is not None and total >= max_frames:
        return limit
    if not isinstance(limit, Quantity):
        return total
    if limit.kind is UnitKind.FRAMES:
        return Quantity(total, Unit.FRAMES)
    return Quantity(total / rate, Unit.S).to(limit.unit)
