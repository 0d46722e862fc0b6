"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and user interaction settings.
"""

from typing import Literal


class CLIDefaults:
    """CLI default values."""

    # Version information
    VERSION = "0.1.0"

    # Default directories
    DEFAULT_SOURCE_DIRECTORY = "."

    # Default boolean values
    DEFAULT_YES = False
    DEFAULT_JSON = False
    DEFAULT_DRY_RUN = False

    # Exit codes
    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    EXIT_INTERRUPTED = 130

    # Confirmation answer that proceeds; anything else aborts
    CONFIRM_ANSWER = "y"


class CLIOptions:
    """CLI option names and flags."""

    # Common options
    VERBOSE = "--verbose"
    VERBOSE_SHORT = "-v"
    LOG_LEVEL = "--log-level"
    LOG_FILE = "--log-file"
    JSON = "--json"
    VERSION = "--version"
    VERSION_SHORT = "-V"
    HELP = "--help"
    HELP_SHORT = "-h"

    # Merge options
    GLOBAL_MATCHER = "--global-matcher"
    GLOBAL_MATCHER_SHORT = "-m"
    GROUPING_MATCHER = "--grouping-matcher"
    GROUPING_MATCHER_SHORT = "-g"
    DIRECTORY = "--dir"
    DIRECTORY_SHORT = "-d"
    OUTPUT_DIRECTORY = "--output-dir"
    OUTPUT_DIRECTORY_SHORT = "-o"
    CONFIG = "--config"
    CONFIG_SHORT = "-c"
    YES = "--yes"
    YES_SHORT = "-y"
    DRY_RUN = "--dry-run"
    NATURAL_SORT = "--natural-sort"
    OVERWRITE = "--overwrite"
    FFMPEG = "--ffmpeg"


class CLIHelp:
    """CLI help text and descriptions."""

    # Version
    VERSION_HELP = "Print version information and exit."
    VERSION_TEXT = "partmerge v{version}"

    # App info
    APP_NAME = "partmerge"
    APP_DESCRIPTION = (
        "Merge split recording parts (GoPro, DJI, ...) into single files with ffmpeg."
    )
    APP_STYLE: Literal["rich"] = "rich"

    GLOBAL_MATCHER_HELP = (
        "Regex selecting candidate filenames (case-insensitive). "
        "Default: common video extensions."
    )
    GROUPING_MATCHER_HELP = (
        "Regex whose first match names the group. Uses the (?P<key>...) named group "
        "when present, otherwise the match minus its last character."
    )
    DIRECTORY_HELP = "Source directory to scan (not recursive)."
    OUTPUT_DIRECTORY_HELP = "Directory for merged files. Default: the source directory."
    CONFIG_HELP = "TOML configuration file."
    YES_HELP = "Skip the confirmation prompt."
    DRY_RUN_HELP = "Show the merge plan and exit without running ffmpeg."
    NATURAL_SORT_HELP = "Order parts by embedded numbers (part_9 before part_10)."
    OVERWRITE_HELP = "Replace existing output files."
    FFMPEG_HELP = "Path to the ffmpeg binary."
    LOG_FILE_HELP = "Also write logs to this file (rotated)."


class CLIMessages:
    """CLI message templates."""

    NO_GROUPS_FOUND = "No groups found in {directory}"
    PLAN_TITLE = "Merge plan ({count} groups)"
    CONFIRM_PROMPT = "Merge these groups? \\[y/N] "
    CANCELLED = "[yellow]Operation cancelled.[/yellow]"
    DRY_RUN_DONE = "[blue]Dry run: nothing was merged.[/blue]"
    GROUP_STARTED = "[bold]Merging group {ordinal}/{total}:[/bold]"
    GROUP_SUCCEEDED = "[green]✅[/green]"
    GROUP_FAILED = "[red]❌[/red]"
    SUMMARY = "{succeeded} of {total} groups merged"

    COMMAND_NAME = "merge"
    INFO_COMMAND_STARTED = "Starting {command} command..."
    INFO_COMMAND_COMPLETED = "Completed {command} command"


__all__ = ["CLIDefaults", "CLIHelp", "CLIMessages", "CLIOptions"]
