"""CLI application definition for CRUSH."""

import typer

from crush.cli.commands import process, init_config, validate_config

app = typer.Typer(
    add_completion=False,
    help="CRUSH - reduce the sample rate and bit depth of audio files.",
    no_args_is_help=True,
)

# Register commands
app.command(name="process", help="Crush an audio file")(process)
app.command(name="init-config", help="Generate an example configuration file")(init_config)
app.command(name="validate-config", help="Validate a configuration file")(validate_config)
