"""CLI command implementations for CRUSH."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from crush.audio import AudioDecoder, PlaybackSink, WavEncoder
from crush.cli.utils import _build_overrides, _create_loader, _sanitize_path
from crush.config import ConfigGenerator, ConfigResolver, Interpolation, OutputValidator, SettingsLoader
from crush.constants import OUTPUT_SAMPLE_RATE, SAMPLE_BITS, VERSION
from crush.exceptions import AudioProcessingError, ConfigError
from crush.output import ConsoleOutputHandler
from crush.signal.pipeline import is_noop, process as run_pipeline

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
        typer.echo(f"CRUSH v{VERSION}")
        raise typer.Exit()


def process(
        input_path: Path = typer.Option(
            ..., "--input", "-i",
            exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="The input file to crush",
        ),
        output: Path | None = typer.Option(
            None, "--output", "-o",
            file_okay=True, dir_okay=False, resolve_path=True,
            help="The output crushed file. Supported formats: WAV",
        ),
        play: bool = typer.Option(False, "--play", "-p", help="Play the crushed sound"),
        bit_depth: int | None = typer.Option(
            None, "--bit-depth", "-b", help="Target bit depth. Default: 16-bit depth."
        ),
        sample_rate: int | None = typer.Option(
            None, "--sample-rate", "-s", help="Target sample rate. Default: 44100 Hz"
        ),
        interpolation: Interpolation | None = typer.Option(
            None, "--interpolation", case_sensitive=False,
            help="Interpolation method for resampling. Default: nearest",
        ),
        config: Path | None = typer.Option(
            None, "--config", "-c", dir_okay=False,
            help="YAML settings file (defaults to ./crush.yaml when present)",
        ),
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,  # Critical: process before other options
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Crush the sample rate and bit depth of an audio file."""

    # Configure logging level based on verbose flag
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)

    console = Console()
    output_handler = ConsoleOutputHandler(console)
    sink: PlaybackSink | None = None

    try:
        # Reject bad requests before any audio is decoded
        OutputValidator().validate(output, play)
        if output is not None:
            WavEncoder.check_path(output)

        loader = _create_loader(config, _build_overrides(sample_rate, bit_depth, interpolation))
        settings = loader.load()
        output_handler.print_settings(settings, loader.source_description)

        if is_noop(settings.bit_depth, settings.sample_rate, OUTPUT_SAMPLE_RATE):
            output_handler.warning("Neither bit depth nor sample rate are being crushed")
        elif settings.bit_depth > SAMPLE_BITS:
            output_handler.warning(
                f"Samples are {SAMPLE_BITS}-bit; a bit depth of {settings.bit_depth} leaves them unchanged"
            )

        decoder = AudioDecoder(output_handler)
        signal = decoder.load_signal(_sanitize_path(input_path))
        output_handler.print_signal_summary("Input", signal)

        crushed = run_pipeline(
            signal,
            settings.sample_rate,
            settings.bit_depth,
            settings.interpolation,
            OUTPUT_SAMPLE_RATE,
            show_progress=True,
        )

        if play:
            sink = PlaybackSink()
            sink.start(crushed)

        if output is not None:
            output_path = _sanitize_path(output)
            WavEncoder().write(crushed, output_path)
            output_handler.success(f"Wrote {output_path}")

        if sink is not None:
            sink.wait()

    except (ConfigError, AudioProcessingError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


def init_config(
        path: Path | None = typer.Argument(
            None, dir_okay=False, help="Where to write the config (default: ./crush.yaml)"
        ),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a documented example configuration file."""
    console = Console()
    target = _sanitize_path(path) if path else ConfigResolver.get_default_path()

    if target.exists() and not force:
        console.print(f"[red]Error:[/red] {target} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ConfigGenerator().generate(target)
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not write {target}: {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Created configuration file:[/green] {target}")


def validate_config(
        config_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="YAML configuration file to validate",
        ),
) -> None:
    """Validate a configuration file and show the settings it produces."""
    console = Console()
    output_handler = ConsoleOutputHandler(console)

    try:
        loader = SettingsLoader.from_yaml(config_path)
        settings = loader.load()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    output_handler.print_settings(settings, loader.source_description)
    output_handler.success("Configuration is valid")
