"""Unit tests for the stream orchestrator."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from pytest_mock import MockerFixture

from sampledsignals.buffers import SampleBuf
from sampledsignals.exceptions import UnitKindError, UnsupportedChannelMappingError, ZeroChannelSourceError
from sampledsignals.formats import SampleFormat
from sampledsignals.orchestrator import check_channel_mapping, read, read_into, wrap_sink, write
from sampledsignals.streams import BufferSink, BufferSource, CollectingSink, EndpointFormat
from sampledsignals.units import Quantity, Unit, frames, hz, ms, seconds
from sampledsignals.wrappers import DownMixSink, ReformatSink, ResampleSink, UpMixSink


class TestChannelMapping:
    """Tests for check_channel_mapping."""

    @pytest.mark.parametrize("source,sink", [(1, 1), (1, 6), (6, 1), (2, 2)])
    def test_supported_mappings(self, source: int, sink: int) -> None:
        """Test that identity, up-mix and down-mix are accepted."""
        check_channel_mapping(source, sink)

    def test_many_to_many_raises(self) -> None:
        """Test that M -> N with both above one is rejected."""
        with pytest.raises(UnsupportedChannelMappingError):
            check_channel_mapping(3, 2)

    def test_zero_channels_raises(self) -> None:
        """Test that a source needs channels."""
        with pytest.raises(ZeroChannelSourceError):
            check_channel_mapping(0, 1)


class TestWrapSink:
    """Tests for wrapper chain construction."""

    def test_matching_endpoints_are_not_wrapped(self) -> None:
        """Test that a direct transfer needs no wrapper."""
        sink = CollectingSink(48000, 2, SampleFormat.FLOAT32)
        assert wrap_sink(sink, EndpointFormat(48000.0, 2, SampleFormat.FLOAT32)) is sink

    def test_full_chain_order(self) -> None:
        """Test mixing outermost, then resampling, then reformatting."""
        sink = CollectingSink(44100, 1, SampleFormat.PCM16)
        chain = wrap_sink(sink, EndpointFormat(48000.0, 2, SampleFormat.FLOAT32), block_size=7)
        assert isinstance(chain, DownMixSink)
        assert isinstance(chain.sink, ResampleSink)
        assert isinstance(chain.sink.sink, ReformatSink)
        assert chain.sink.sink.sink is sink
        assert chain.block_size == chain.sink.block_size == 7
        assert (chain.rate, chain.channels, chain.format) == (48000.0, 2, SampleFormat.FLOAT32)

    def test_up_mix_chain(self) -> None:
        """Test that a mono source gets an up-mixer."""
        sink = CollectingSink(48000, 2, SampleFormat.FLOAT32)
        chain = wrap_sink(sink, EndpointFormat(48000.0, 1, SampleFormat.FLOAT32))
        assert isinstance(chain, UpMixSink)
        assert chain.sink is sink

    def test_logs_chain(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that wrapper decisions are logged at DEBUG."""
        sink = CollectingSink(48000, 1, SampleFormat.PCM16)
        with caplog.at_level(logging.DEBUG, logger="sampledsignals.orchestrator"):
            wrap_sink(sink, EndpointFormat(48000.0, 1, SampleFormat.FLOAT32))
        assert "ReformatSink float32 -> pcm16" in caplog.text


class TestWrite:
    """Tests for write."""

    def test_round_trip_identity(self, ramp_factory) -> None:
        """Test that matching endpoints copy every frame unchanged."""
        buf = ramp_factory(frames=100, channels=2, dtype=np.float32)
        target = SampleBuf.zeros(SampleFormat.FLOAT32, 48000, 100, channels=2)
        assert write(BufferSink(target), buf) == 100
        assert target == buf

    def test_partial_transfer(self, ramp_factory) -> None:
        """Test that asking for more than the source holds is not an error."""
        source = BufferSource(ramp_factory(frames=10))
        sink = CollectingSink(48000, 1, SampleFormat.FLOAT64)
        assert write(sink, source, 20) == 10
        assert sink.pending == 10

    def test_limit_stops_early(self, ramp_factory) -> None:
        """Test that a frame limit is honoured and echoed back."""
        source = BufferSource(ramp_factory(frames=100))
        sink = CollectingSink(48000, 1, SampleFormat.FLOAT64)
        assert write(sink, source, 30, block_size=8) == 30
        assert source.position == 30

    def test_many_to_many_raises_before_transfer(self, ramp_factory, mocker: MockerFixture) -> None:
        """Test that no frame moves when the channel layout is unsupported."""
        source = BufferSource(ramp_factory(channels=3))
        read_spy = mocker.spy(source, "read_into")
        sink = CollectingSink(48000, 2, SampleFormat.FLOAT64)
        with pytest.raises(UnsupportedChannelMappingError):
            write(sink, source)
        read_spy.assert_not_called()
        assert sink.pending == 0

    def test_float_into_pcm16_clamps(self) -> None:
        """Test that out of range floats saturate in fixed-point sinks."""
        target = SampleBuf.zeros(SampleFormat.PCM16, 48000, 2)
        write(BufferSink(target), SampleBuf(np.array([1.5, -1.5], dtype=np.float32), 48000))
        np.testing.assert_array_equal(target.data[:, 0], [32767, -32768])
        assert target.data[0, 0] / 32768 == pytest.approx(0.999969, abs=1e-6)

    def test_down_mix(self) -> None:
        """Test a stereo source into a mono sink."""
        sink = CollectingSink(100, 1, SampleFormat.FLOAT64)
        write(sink, SampleBuf(np.array([[0.1, 0.2], [0.3, 0.4]]), 100))
        np.testing.assert_allclose(sink.to_buffer().data, [[0.3], [0.7]])

    def test_up_mix(self) -> None:
        """Test a mono source into a stereo sink."""
        sink = CollectingSink(100, 2, SampleFormat.FLOAT64)
        write(sink, SampleBuf(np.array([0.5, -0.25]), 100))
        np.testing.assert_array_equal(sink.to_buffer().data, [[0.5, 0.5], [-0.25, -0.25]])

    def test_resample_split_matches_single_call(self, ramp_factory) -> None:
        """Test that two writes into one wrapped sink equal one write."""
        whole = CollectingSink(44100, 1, SampleFormat.FLOAT64)
        assert write(whole, ramp_factory()) == 64
        assert whole.pending == 58

        ramp = ramp_factory()
        split = CollectingSink(44100, 1, SampleFormat.FLOAT64)
        chain = wrap_sink(split, EndpointFormat(48000.0, 1, SampleFormat.FLOAT64))
        write(chain, ramp[0:30])
        write(chain, ramp[30:64])
        np.testing.assert_allclose(split.to_buffer().data, whole.to_buffer().data, atol=1e-6)

    def test_bare_array_uses_sink_rate(self) -> None:
        """Test that an ndarray source is read at the sink's rate."""
        sink = CollectingSink(22050, 1, SampleFormat.FLOAT32)
        assert write(sink, np.zeros(5, dtype=np.float32)) == 5
        assert sink.pending == 5

    def test_blocked_source(self, blocked_source_factory) -> None:
        """Test that the source's block size drives the copy loop."""
        index = np.arange(1, 17, dtype=np.float32)[:, np.newaxis]
        data = index * np.array([[1.0, 2.0]], dtype=np.float32)
        source = blocked_source_factory(data, rate=48.0, block_size=16)
        sink = CollectingSink(48, 2, SampleFormat.FLOAT32)
        assert write(sink, source) == 16
        assert all(count == 16 for count in source.requests)
        np.testing.assert_array_equal(sink.to_buffer().data, data)

    def test_short_write_stops_and_warns(
        self, ramp_factory, limited_sink_factory, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a full sink ends the copy."""
        sink = limited_sink_factory(5)
        with caplog.at_level(logging.WARNING):
            assert write(sink, BufferSource(ramp_factory(frames=20)), block_size=4) == 5
        assert "dropped" in caplog.text

    def test_zero_limit(self, ramp_factory) -> None:
        """Test that a zero limit moves nothing."""
        source = BufferSource(ramp_factory())
        assert write(CollectingSink(48000, 1, SampleFormat.FLOAT64), source, 0) == 0
        assert source.position == 0

    def test_negative_limit_raises(self, ramp_factory) -> None:
        """Test that negative limits are rejected."""
        with pytest.raises(ValueError, match="negative"):
            write(CollectingSink(48000, 1, SampleFormat.FLOAT64), BufferSource(ramp_factory()), -1)


class TestQuantityLimits:
    """Tests for time and frame quantity limits."""

    @pytest.fixture
    def sink(self) -> CollectingSink:
        """Create a mono float64 sink at 100 Hz."""
        return CollectingSink(100, 1, SampleFormat.FLOAT64)

    def test_time_limit_echoed_when_complete(self, sink: CollectingSink, ramp_factory) -> None:
        """Test that a completed duration comes back unchanged."""
        limit = seconds(0.5)
        assert write(sink, BufferSource(ramp_factory(frames=100, rate=100)), limit) is limit
        assert sink.pending == 50

    def test_time_limit_partial(self, sink: CollectingSink, ramp_factory) -> None:
        """Test that a partial copy is reported in the limit's unit."""
        result = write(sink, BufferSource(ramp_factory(frames=20, rate=100)), ms(500))
        assert isinstance(result, Quantity)
        assert result.unit is Unit.MS
        assert result.value == pytest.approx(200.0)

    def test_frames_limit_partial(self, sink: CollectingSink, ramp_factory) -> None:
        """Test that frame quantities report frames."""
        result = write(sink, BufferSource(ramp_factory(frames=20, rate=100)), frames(50))
        assert result == Quantity(20, Unit.FRAMES)

    def test_frequency_limit_raises(self, sink: CollectingSink, ramp_factory) -> None:
        """Test that a frequency is not a length."""
        with pytest.raises(UnitKindError):
            write(sink, BufferSource(ramp_factory(rate=100)), hz(5))


class TestRead:
    """Tests for read and read_into."""

    def test_read_count(self, ramp_factory) -> None:
        """Test reading a fixed number of frames."""
        out = read(BufferSource(ramp_factory(frames=10)), 4)
        assert out.shape == (4, 1)
        np.testing.assert_array_equal(out.data[:, 0], [0, 1, 2, 3])

    def test_read_short_truncates(self, ramp_factory) -> None:
        """Test that a short read returns a shorter buffer."""
        out = read(BufferSource(ramp_factory(frames=10)), 20)
        assert out.nframes == 10
        assert out.rate == 48000

    def test_read_duration(self, ramp_factory) -> None:
        """Test reading a duration at the source's rate."""
        out = read(BufferSource(ramp_factory(frames=100, rate=100)), seconds(0.25))
        assert out.nframes == 25

    def test_read_everything(self, ramp_factory) -> None:
        """Test that no count reads until exhaustion."""
        out = read(BufferSource(ramp_factory(frames=10, channels=2)), block_size=3)
        assert out == ramp_factory(frames=10, channels=2)

    def test_read_into_converts_format(self) -> None:
        """Test that read_into converts into the buffer's format."""
        target = SampleBuf.zeros(SampleFormat.PCM16, 100, 3)
        source = BufferSource(SampleBuf(np.array([0.5, -0.5, 0.25, 0.75], dtype=np.float32), 100))
        assert read_into(source, target) == 3
        np.testing.assert_array_equal(target.data[:, 0], [16384, -16384, 8192])
        assert source.position == 3

    def test_read_into_resamples_until_full(self, ramp_factory) -> None:
        """Test that a different rate fills the buffer."""
        target = SampleBuf.zeros(SampleFormat.FLOAT64, 24000, 10)
        read_into(BufferSource(ramp_factory(frames=64)), target)
        np.testing.assert_allclose(target.data[:, 0], np.arange(10) * 2.0)

    def test_read_into_full_buffer_is_not_a_drop(
        self, ramp_factory, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that filling the target buffer ends quietly."""
        target = SampleBuf.zeros(SampleFormat.FLOAT64, 24000, 10)
        with caplog.at_level(logging.DEBUG, logger="sampledsignals.orchestrator"):
            assert read_into(BufferSource(ramp_factory(frames=64)), target) == 20
        assert "Buffer full after 20 frames" in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
