"""Merge command helper functions.

Console presentation for the merge pipeline: the plan table, the
confirmation gate and per-group progress.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from partmerge.core.models import MergeGroup, MergePlan, MergeResult, RunOutcome
from partmerge.shared.constants import CLIDefaults, CLIMessages


def present_plan(plan: MergePlan, console: Console) -> None:
    """Print every group with its ordinal, parts and output file.

    Args:
        plan: Merge plan
        console: Rich console
    """
    table = Table(
        title=CLIMessages.PLAN_TITLE.format(count=len(plan)),
        show_lines=True,
    )
    table.add_column("#", justify="right", style="bold")
    table.add_column("Parts")
    table.add_column("Count", justify="right")
    table.add_column("Output", style="green")

    for ordinal, group in enumerate(plan.groups, start=1):
        table.add_row(
            str(ordinal),
            Text("\n".join(group.files)),
            str(group.size),
            Text(group.output_path.name),
        )

    console.print(table)
    console.print(Text(f"Output directory: {plan.output_directory}", style="dim"))


def confirm_merge(
    console: Console,
    read_line: Callable[[str], str] | None = None,
) -> bool:
    """Ask for confirmation.

    Only an answer of exactly ``y`` (surrounding whitespace ignored)
    proceeds; ``Y``, ``yes`` or an empty line all cancel.

    Args:
        console: Rich console
        read_line: Input source taking the prompt, defaults to ``console.input``

    Returns:
        True if confirmed
    """
    reader = read_line or console.input
    try:
        answer = reader(CLIMessages.CONFIRM_PROMPT)
    except (KeyboardInterrupt, EOFError):
        console.print()
        console.print(CLIMessages.CANCELLED)
        return False

    if answer.strip() == CLIDefaults.CONFIRM_ANSWER:
        return True

    console.print(CLIMessages.CANCELLED)
    return False


def print_group_start(ordinal: int, total: int, group: MergeGroup, console: Console) -> None:
    """Announce the group about to be merged."""
    console.print(
        CLIMessages.GROUP_STARTED.format(ordinal=ordinal, total=total),
        Text(group.key),
    )


def print_group_result(result: MergeResult, console: Console) -> None:
    """Relay the tool output and the group's status."""
    if result.output:
        console.print(Text(result.output.rstrip(), style="dim"))

    if result.success:
        console.print(CLIMessages.GROUP_SUCCEEDED, Text(str(result.group.output_path)))
        return

    reason = result.error or f"exit status {result.return_code}"
    console.print(CLIMessages.GROUP_FAILED, Text(f"{result.group.key}: {reason}"))


def print_summary(outcome: RunOutcome, console: Console) -> None:
    """Print how many groups merged."""
    style = "green" if not outcome.failed else "yellow"
    console.print(
        Text(
            CLIMessages.SUMMARY.format(
                succeeded=len(outcome.succeeded),
                total=len(outcome.results),
            ),
            style=f"bold {style}",
        ),
    )
