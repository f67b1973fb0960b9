"""CLI command implementations for sampledsignals."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from tqdm import tqdm

from sampledsignals.constants import VERSION
from sampledsignals.exceptions import SampledSignalsError
from sampledsignals.config import ConfigGenerator, ConfigResolver, SettingsLoader
from sampledsignals.formats import SampleFormat
from sampledsignals.io import SoundFileSink, SoundFileSource, file_info
from sampledsignals.orchestrator import check_channel_mapping, write
from sampledsignals.output import ConsoleOutputHandler
from sampledsignals.resamplers import ResampleMethod
from sampledsignals.cli.utils import ProgressSource, _format_duration, _sanitize_path

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"sampledsignals v{VERSION}")
        raise typer.Exit()


def _set_verbosity(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def main(
        version: bool = typer.Option(
            False, "--version", "-V",
            callback=version_callback,
            is_eager=True,  # Critical: process before other options
            help="Show version and exit."
        ),
) -> None:
    """Sample-rate aware audio stream conversion."""


def convert(
        input_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Audio file to read"
        ),
        output_path: Path = typer.Argument(
            ..., file_okay=True, dir_okay=False, resolve_path=True,
            help="Audio file to write (container chosen from the extension)"
        ),
        rate: int | None = typer.Option(None, "--rate", "-r", min=1, help="Output sample rate in Hz (default: input rate)"),
        channels: int | None = typer.Option(None, "--channels", "-c", min=1,
                                            help="Output channel count (default: input channels)"),
        fmt: SampleFormat | None = typer.Option(None, "--format", "-f", case_sensitive=False,
                                                help="Output sample format (default: config, then input format)"),
        block_size: int | None = typer.Option(None, "--block-size", "-b", min=1, help="Frames per block"),
        method: ResampleMethod | None = typer.Option(None, "--method", "-m", case_sensitive=False,
                                                     help="Resampling method"),
        config: Path | None = typer.Option(None, "--config", dir_okay=False, help="Path to a YAML settings file"),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Convert an audio file to another rate, channel count or sample format."""
    _set_verbosity(verbose)
    output = ConsoleOutputHandler(Console())

    try:
        settings = SettingsLoader.from_path(config).load()
        options = settings.resample
        if method is not None:
            options = options.model_copy(update={"method": method})

        with SoundFileSource(_sanitize_path(input_path)) as source:
            target_rate = rate or source.rate
            target_channels = channels or source.channels
            target_format = fmt or settings.output_format or source.format
            # fail before the output file is created
            check_channel_mapping(source.channels, target_channels)

            with SoundFileSink(_sanitize_path(output_path), target_rate, target_channels, target_format) as sink:
                with tqdm(total=source.frames, desc="Converting", unit="frame", unit_scale=True) as progress:
                    copied = write(
                        sink,
                        ProgressSource(source, progress),
                        block_size=block_size or settings.block_size,
                        resample=options,
                    )
            source_rate = source.rate
            input_desc = f"{source_rate:g} Hz, {source.channels} ch, {source.format.value}"
    except SampledSignalsError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    output.table("Conversion summary", [
        ("Input", f"{input_path} ({input_desc})"),
        ("Output", f"{output_path} ({target_rate:g} Hz, {target_channels} ch, {target_format.value})"),
        ("Frames read", str(copied)),
        ("Duration", _format_duration(copied / source_rate)),
    ])


def info(
        input_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Audio file to inspect"
        ),
) -> None:
    """Show rate, channels, format and length of an audio file."""
    output = ConsoleOutputHandler(Console())
    try:
        details = file_info(input_path)
    except SampledSignalsError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    output.table(input_path.name, [
        ("Sample rate", f"{details.rate:g} Hz"),
        ("Channels", str(details.channels)),
        ("Format", f"{details.format.value} ({details.subtype})"),
        ("Frames", str(details.frames)),
        ("Duration", _format_duration(details.duration)),
    ])


def init_config(
        path: Path | None = typer.Argument(None, dir_okay=False, help="Where to write the file"),
        force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write an example settings file with the built-in defaults."""
    output = ConsoleOutputHandler(Console())
    target = path or ConfigResolver.get_default_path()

    if target.exists() and not force:
        output.error(f"{target} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ConfigGenerator().generate(target)
    except OSError as e:
        output.error(f"Failed to write {target}: {e}")
        raise typer.Exit(code=1)
    output.info(f"[green]Configuration written to[/green] {target}")


def validate_config(
        path: Path | None = typer.Argument(None, dir_okay=False, help="Settings file (default: auto-detect)"),
) -> None:
    """Validate a settings file and show the effective values."""
    output = ConsoleOutputHandler(Console())
    try:
        loader = SettingsLoader.from_path(path)
        settings = loader.load()
    except SampledSignalsError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    output.table(f"Settings from {loader.source.source_description}", [
        ("Block size", str(settings.block_size) if settings.block_size else "source default"),
        ("Output format", settings.output_format.value if settings.output_format else "input format"),
        ("Resample method", settings.resample.method.value),
        ("Half length", str(settings.resample.half_length)),
        ("Kaiser beta", f"{settings.resample.kaiser_beta:g}"),
        ("Max denominator", str(settings.resample.max_denominator)),
    ])
