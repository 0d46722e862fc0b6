"""
partmerge Typer CLI Application

Single-command Typer application: find split recording parts in a
directory, show the merge plan, ask for confirmation and join each group
with ffmpeg.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from partmerge.cli.common.context import CliContext, LogLevel, set_cli_context
from partmerge.cli.common.error_handler import handle_cli_error
from partmerge.cli.common.models import MergeOptions
from partmerge.cli.common.options import (
    json_output_option,
    log_file_option,
    log_level_option,
    verbose_option,
    version_option,
)
from partmerge.cli.merge_handler import handle_merge_command
from partmerge.shared.constants import CLIDefaults, CLIHelp, CLIMessages, CLIOptions
from partmerge.utils.logging_config import setup_logging

# Version information
__version__ = CLIDefaults.VERSION


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
    context_settings={"help_option_names": [CLIOptions.HELP_SHORT, CLIOptions.HELP]},
)


@app.command()
def merge(
    global_matcher: str | None = typer.Option(
        None,
        CLIOptions.GLOBAL_MATCHER,
        CLIOptions.GLOBAL_MATCHER_SHORT,
        help=CLIHelp.GLOBAL_MATCHER_HELP,
    ),
    grouping_matcher: str | None = typer.Option(
        None,
        CLIOptions.GROUPING_MATCHER,
        CLIOptions.GROUPING_MATCHER_SHORT,
        help=CLIHelp.GROUPING_MATCHER_HELP,
    ),
    directory: Path | None = typer.Option(
        None,
        CLIOptions.DIRECTORY,
        CLIOptions.DIRECTORY_SHORT,
        help=CLIHelp.DIRECTORY_HELP,
        file_okay=False,
    ),
    output_directory: Path | None = typer.Option(
        None,
        CLIOptions.OUTPUT_DIRECTORY,
        CLIOptions.OUTPUT_DIRECTORY_SHORT,
        help=CLIHelp.OUTPUT_DIRECTORY_HELP,
        file_okay=False,
    ),
    config: Path | None = typer.Option(
        None,
        CLIOptions.CONFIG,
        CLIOptions.CONFIG_SHORT,
        help=CLIHelp.CONFIG_HELP,
        dir_okay=False,
    ),
    yes: bool = typer.Option(
        CLIDefaults.DEFAULT_YES,
        CLIOptions.YES,
        CLIOptions.YES_SHORT,
        help=CLIHelp.YES_HELP,
    ),
    dry_run: bool = typer.Option(
        CLIDefaults.DEFAULT_DRY_RUN,
        CLIOptions.DRY_RUN,
        help=CLIHelp.DRY_RUN_HELP,
    ),
    natural_sort: bool = typer.Option(
        False,
        CLIOptions.NATURAL_SORT,
        help=CLIHelp.NATURAL_SORT_HELP,
    ),
    overwrite: bool = typer.Option(
        False,
        CLIOptions.OVERWRITE,
        help=CLIHelp.OVERWRITE_HELP,
    ),
    ffmpeg: str | None = typer.Option(
        None,
        CLIOptions.FFMPEG,
        help=CLIHelp.FFMPEG_HELP,
    ),
    json_output: Annotated[bool, json_output_option] = CLIDefaults.DEFAULT_JSON,
    verbose: Annotated[int, verbose_option] = 0,
    log_level: Annotated[LogLevel, log_level_option] = LogLevel.WARNING,
    log_file: Annotated[Path | None, log_file_option] = None,
    version: Annotated[bool, version_option] = False,
) -> None:
    """
    Merge split recording parts into single files.

    Lists the source directory (not recursively), keeps the files whose
    names match the global matcher and groups them by the key the grouping
    matcher extracts. Groups with at least two parts are shown as a plan;
    after confirmation each group is joined with ffmpeg's concat demuxer
    using stream copy, so nothing is re-encoded.

    Examples:
        # Merge DJI clips in the current directory
        partmerge

        # GoPro chapters (GH010042.MP4, GH020042.MP4, ...) grouped by clip number
        partmerge -d /media/card -g '^G[HX]\\d{2}(?P<key>\\d{4})'

        # Show the plan only
        partmerge -d /media/card --dry-run

        # Unattended run with a machine-readable report
        partmerge -d /media/card --yes --json
    """
    del version  # handled eagerly by its callback

    command = CLIMessages.COMMAND_NAME
    try:
        context = CliContext(
            verbose=verbose,
            log_level=log_level,
            json_output=json_output,
        )
        set_cli_context(context)
        setup_logging(context.get_effective_log_level(), log_file)

        options = MergeOptions(
            global_matcher=global_matcher,
            grouping_matcher=grouping_matcher,
            directory=directory,
            output_directory=output_directory,
            config=config,
            ffmpeg=ffmpeg,
            # Plain flags only ever switch a setting on
            natural_sort=natural_sort or None,
            overwrite=overwrite or None,
            yes=yes,
            dry_run=dry_run,
            json_output=json_output,
            verbose=verbose,
        )
        exit_code = handle_merge_command(options)
    except (Exception, KeyboardInterrupt) as e:
        exit_code = handle_cli_error(e, command, json_output=json_output)
        raise typer.Exit(exit_code) from e

    if exit_code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
