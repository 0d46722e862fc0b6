"""Merge command handler for partmerge CLI.

Loads the configuration, runs the merge pipeline and reports the outcome
either on the rich console or as a JSON document.
"""

from __future__ import annotations

import logging
from typing import Callable

from rich.console import Console
from rich.text import Text

from partmerge.cli.common.models import MergeOptions
from partmerge.cli.common.validation import ensure_json_mode_consistency
from partmerge.cli.helpers.merge import (
    confirm_merge,
    present_plan,
    print_group_result,
    print_group_start,
    print_summary,
)
from partmerge.cli.json_formatter import format_json_output, write_json_output
from partmerge.config import MergeSettings, load_settings
from partmerge.core import GroupingMerger, MergePlan, RunOutcome, RunStatus
from partmerge.shared.constants import CLIDefaults, CLIMessages

logger = logging.getLogger(__name__)


def handle_merge_command(
    options: MergeOptions,
    *,
    console: Console | None = None,
    read_line: Callable[[str], str] | None = None,
    merger_factory: Callable[[MergeSettings], GroupingMerger] = GroupingMerger,
) -> int:
    """Handle the merge command.

    Args:
        options: Validated merge command options
        console: Rich console, created if omitted
        read_line: Input source for the confirmation prompt
        merger_factory: Builds the merger from the loaded settings

    Returns:
        Exit code (0 for success, non-zero if any group failed)

    Raises:
        PatternError: If a matcher is malformed
        FilesystemError: If the source directory cannot be listed
        ApplicationError: On invalid configuration or option combinations
    """
    command = CLIMessages.COMMAND_NAME
    logger.info(CLIMessages.INFO_COMMAND_STARTED.format(command=command))

    ensure_json_mode_consistency(options, "handle_merge_command")
    console = console or Console()

    settings = load_settings(options.config, **options.settings_overrides())
    merger = merger_factory(settings)

    if options.json_output:
        outcome = merger.run(
            present=lambda plan: None,
            confirm=lambda plan: True,
            dry_run=options.dry_run,
        )
        _write_json_outcome(outcome, command)
    else:
        outcome = merger.run(
            present=lambda plan: present_plan(plan, console),
            confirm=_confirmation(options, console, read_line),
            dry_run=options.dry_run,
            on_start=lambda ordinal, total, group: print_group_start(
                ordinal, total, group, console
            ),
            on_result=lambda result: print_group_result(result, console),
        )
        _print_outcome(outcome, console)

    logger.info(CLIMessages.INFO_COMMAND_COMPLETED.format(command=command))

    if outcome.failed:
        return CLIDefaults.EXIT_ERROR
    return CLIDefaults.EXIT_SUCCESS


def _confirmation(
    options: MergeOptions,
    console: Console,
    read_line: Callable[[str], str] | None,
) -> Callable[[MergePlan], bool]:
    """Confirmation callback; ``--yes`` answers for the user."""
    if options.yes:
        return lambda plan: True
    return lambda plan: confirm_merge(console, read_line)


def _print_outcome(outcome: RunOutcome, console: Console) -> None:
    """Print the closing message for each terminal status."""
    if outcome.status is RunStatus.NO_GROUPS:
        console.print(
            Text(
                CLIMessages.NO_GROUPS_FOUND.format(
                    directory=outcome.plan.source_directory,
                ),
                style="yellow",
            ),
        )
    elif outcome.status is RunStatus.DRY_RUN:
        console.print(CLIMessages.DRY_RUN_DONE)
    elif outcome.status is RunStatus.DONE:
        print_summary(outcome, console)


def _write_json_outcome(outcome: RunOutcome, command: str) -> None:
    """Write the outcome as a JSON document on stdout."""
    warnings: list[str] = []
    if outcome.status is RunStatus.NO_GROUPS:
        warnings.append(
            CLIMessages.NO_GROUPS_FOUND.format(directory=outcome.plan.source_directory),
        )

    errors = [
        f"{result.group.key}: {result.error or f'exit status {result.return_code}'}"
        for result in outcome.failed
    ]
    payload = format_json_output(
        success=not errors,
        command=command,
        data=outcome.to_dict(),
        errors=errors,
        warnings=warnings,
    )
    write_json_output(payload)
