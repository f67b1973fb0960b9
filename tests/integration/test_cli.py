"""End-to-end tests for the command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
import soundfile as sf
from typer.testing import CliRunner

from sampledsignals.cli.app import app
from sampledsignals.constants import VERSION


@pytest.fixture
def runner() -> CliRunner:
    """Create a Typer CLI runner with a wide terminal so rich does not wrap."""
    return CliRunner(env={"COLUMNS": "200"})


class TestConvertCommand:
    """Tests for the convert command."""

    def test_convert_rate_channels_format(self, runner: CliRunner, wav_factory, tmp_output_dir: Path) -> None:
        """Test a full conversion and its summary."""
        output = tmp_output_dir / "out.wav"
        result = runner.invoke(app, [
            "convert", str(wav_factory()), str(output),
            "--rate", "44100", "--channels", "1", "--format", "pcm16",
        ])
        assert result.exit_code == 0, result.output
        assert "Conversion summary" in result.output
        info = sf.info(str(output))
        assert info.samplerate == 44100
        assert info.channels == 1
        assert info.subtype == "PCM_16"

    def test_convert_keeps_input_parameters(self, runner: CliRunner, wav_factory, tmp_output_dir: Path) -> None:
        """Test that unspecified parameters follow the input."""
        output = tmp_output_dir / "copy.wav"
        result = runner.invoke(app, ["convert", str(wav_factory(subtype="PCM_16")), str(output)])
        assert result.exit_code == 0, result.output
        info = sf.info(str(output))
        assert (info.samplerate, info.channels, info.subtype, info.frames) == (48000, 2, "PCM_16", 12000)

    def test_convert_with_polyphase_and_config(
        self, runner: CliRunner, wav_factory, tmp_output_dir: Path, tmp_path: Path
    ) -> None:
        """Test that the settings file supplies the output format."""
        config = tmp_path / "settings.yaml"
        config.write_text("stream:\n  output_format: pcm24\n  block_size: 512\n")
        output = tmp_output_dir / "poly.wav"
        result = runner.invoke(app, [
            "convert", str(wav_factory()), str(output),
            "--rate", "32000", "--method", "polyphase", "--config", str(config),
        ])
        assert result.exit_code == 0, result.output
        info = sf.info(str(output))
        assert info.subtype == "PCM_24"
        assert info.samplerate == 32000

    def test_unsupported_channel_mapping(self, runner: CliRunner, wav_factory, tmp_output_dir: Path) -> None:
        """Test that 3 -> 2 channels fails before writing anything."""
        output = tmp_output_dir / "never.wav"
        result = runner.invoke(app, [
            "convert", str(wav_factory(channels=3)), str(output), "--channels", "2",
        ])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert not output.exists()

    def test_invalid_config(self, runner: CliRunner, wav_factory, tmp_output_dir: Path, tmp_path: Path) -> None:
        """Test that configuration errors exit with code 1."""
        config = tmp_path / "bad.yaml"
        config.write_text("resample:\n  method: cubic\n")
        result = runner.invoke(app, [
            "convert", str(wav_factory()), str(tmp_output_dir / "x.wav"), "--config", str(config),
        ])
        assert result.exit_code == 1
        assert "Invalid resample method" in result.output


class TestInfoCommand:
    """Tests for the info command."""

    def test_info(self, runner: CliRunner, wav_factory) -> None:
        """Test the file summary."""
        result = runner.invoke(app, ["info", str(wav_factory(subtype="PCM_16"))])
        assert result.exit_code == 0, result.output
        assert "48000 Hz" in result.output
        assert "pcm16" in result.output
        assert "12000" in result.output


class TestConfigCommands:
    """Tests for init-config and validate-config."""

    def test_init_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test writing and refusing to overwrite a settings file."""
        target = tmp_path / "sampledsignals.yaml"
        result = runner.invoke(app, ["init-config", str(target)])
        assert result.exit_code == 0, result.output
        assert target.exists()

        again = runner.invoke(app, ["init-config", str(target)])
        assert again.exit_code == 1
        assert "already exists" in again.output

        forced = runner.invoke(app, ["init-config", str(target), "--force"])
        assert forced.exit_code == 0

    def test_validate_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test showing the effective settings."""
        target = tmp_path / "sampledsignals.yaml"
        target.write_text("resample:\n  method: polyphase\n")
        result = runner.invoke(app, ["validate-config", str(target)])
        assert result.exit_code == 0, result.output
        assert "polyphase" in result.output


class TestVersion:
    """Tests for the --version flag."""

    def test_version(self, runner: CliRunner) -> None:
        """Test the eager version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output
