"""
Reusable Typer Options Module

Centralized option definitions for logging and output flags. Use them as
``Annotated[<type>, <option>]`` metadata in command signatures.
"""

from __future__ import annotations

import typer

from partmerge.shared.constants import CLIDefaults, CLIHelp, CLIOptions


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=CLIDefaults.VERSION))
        raise typer.Exit


# Verbose option - count-based for multiple -v flags
verbose_option = typer.Option(
    CLIOptions.VERBOSE,
    CLIOptions.VERBOSE_SHORT,
    count=True,
    help="Enable verbose output (equivalent to --log-level DEBUG).",
)

# Log level option - enum-based with case-insensitive choices
log_level_option = typer.Option(
    CLIOptions.LOG_LEVEL,
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: WARNING.",
)

# Log file option
log_file_option = typer.Option(
    CLIOptions.LOG_FILE,
    dir_okay=False,
    help=CLIHelp.LOG_FILE_HELP,
)

# JSON output option - flag-based
json_output_option = typer.Option(
    CLIOptions.JSON,
    help="Enable machine-readable JSON output instead of human-readable format.",
)

# Version option - eager so it runs before any validation
version_option = typer.Option(
    CLIOptions.VERSION,
    CLIOptions.VERSION_SHORT,
    help=CLIHelp.VERSION_HELP,
    callback=version_callback,
    is_eager=True,
)
