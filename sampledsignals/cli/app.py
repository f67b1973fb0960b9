"""CLI application definition for sampledsignals."""

import typer

from sampledsignals.cli.commands import main, convert, info, init_config, validate_config

app = typer.Typer(
    add_completion=False,
    help="Sample-rate aware audio stream conversion.",
    no_args_is_help=True,
)

# Register commands
app.callback()(main)
app.command(name="convert", help="Convert an audio file's rate, channels or format")(convert)
app.command(name="info", help="Show audio file properties")(info)
app.command(name="init-config", help="Generate an example configuration file")(init_config)
app.command(name="validate-config", help="Validate a configuration file")(validate_config)
