"""
CLI error handling.

The single exit point for failures: every exception that escapes the
merge command is turned into a ``CliError``, logged, shown to the user
(``Error: ...`` on stderr, or a JSON document in ``--json`` mode) and
converted to the process exit code.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from partmerge.cli.json_formatter import format_json_output, write_json_output
from partmerge.shared.constants import CLIDefaults
from partmerge.shared.errors import CliError, PartMergeError, create_cli_error

logger = logging.getLogger(__name__)


def handle_cli_error(
    error: BaseException,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Report ``error`` and return the exit code for it.

    Args:
        error: The exception that ended the command
        command: Command name, used in logs and JSON output
        json_output: Write a JSON error document instead of plain text

    Returns:
        Exit code (130 for an interrupt, the CliError's own code otherwise)
    """
    cli_error = to_cli_error(error, command)
    _log_error(error, cli_error, command)

    if json_output:
        payload = format_json_output(
            success=False,
            command=command,
            errors=[cli_error.message],
            data=_error_data(error, cli_error),
        )
        write_json_output(payload)
    else:
        sys.stderr.write(f"Error: {cli_error.message}\n")

    return cli_error.exit_code


def to_cli_error(error: BaseException, command: str) -> CliError:
    """Map any exception to a CliError carrying the user-facing message."""
    if isinstance(error, CliError):
        return error

    if isinstance(error, KeyboardInterrupt):
        return create_cli_error(
            "Command interrupted by user",
            command=command,
            exit_code=CLIDefaults.EXIT_INTERRUPTED,
        )

    # Pattern, configuration and filesystem errors already read well
    if isinstance(error, PartMergeError):
        message = error.message
    elif isinstance(error, OSError):
        message = f"File system error: {error}"
    else:
        message = f"Unexpected error: {error}"

    return create_cli_error(
        message,
        command=command,
        original_error=error if isinstance(error, Exception) else None,
        exit_code=CLIDefaults.EXIT_ERROR,
    )


def _error_data(error: BaseException, cli_error: CliError) -> dict[str, Any]:
    source = error if isinstance(error, PartMergeError) else cli_error
    data = source.to_dict()
    data["error_type"] = type(error).__name__
    data["exit_code"] = cli_error.exit_code
    return data


def _log_error(error: BaseException, cli_error: CliError, command: str) -> None:
    if isinstance(error, KeyboardInterrupt):
        logger.warning("%s interrupted", command)
    elif isinstance(error, PartMergeError):
        # Expected failures: traceback only when debugging
        logger.error(
            "%s failed: %s",
            command,
            cli_error.message,
            exc_info=logger.isEnabledFor(logging.DEBUG),
        )
    else:
        logger.exception("%s failed unexpectedly: %s", command, cli_error.message)
