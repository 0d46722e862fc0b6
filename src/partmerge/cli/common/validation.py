"""
Validation utilities for CLI commands.

Checks option combinations before any work starts.
"""

from __future__ import annotations

from partmerge.cli.common.models import MergeOptions
from partmerge.shared.errors import ApplicationError, ErrorCode, ErrorContext


def ensure_json_mode_consistency(options: MergeOptions, operation: str) -> None:
    """Ensure JSON mode and console options are consistent.

    JSON output owns stdout, so it cannot be combined with an interactive
    prompt or with verbose console logging.

    Args:
        options: Merge command options
        operation: Operation name for error context

    Raises:
        ApplicationError: If options are inconsistent
    """
    if not options.json_output:
        return

    if options.verbose:
        raise ApplicationError(
            ErrorCode.VALIDATION_ERROR,
            "Cannot use --json with --verbose (mutually exclusive)",
            ErrorContext(
                operation=operation,
                additional_data={"json_output": True, "verbose": options.verbose},
            ),
        )

    if not (options.yes or options.dry_run):
        raise ApplicationError(
            ErrorCode.VALIDATION_ERROR,
            "--json needs --yes or --dry-run because it cannot prompt for confirmation",
            ErrorContext(
                operation=operation,
                additional_data={"json_output": True, "yes": False, "dry_run": False},
            ),
        )
