"""
partmerge Package Main Entry Point

This module serves as the entry point when the package is run as a module
using `python -m partmerge`, and backs the ``partmerge`` console script.
"""

import logging
import sys

from partmerge.cli.common.context import get_cli_context
from partmerge.cli.common.error_handler import handle_cli_error
from partmerge.cli.typer_app import app
from partmerge.shared.constants import CLIDefaults, CLIHelp

logger = logging.getLogger(__name__)


def _json_mode() -> bool:
    try:
        return get_cli_context().json_output
    except RuntimeError:
        return False


def main() -> None:
    """Run the CLI, mapping errors that escape Typer to exit codes."""
    try:
        app(prog_name=CLIHelp.APP_NAME)
    except KeyboardInterrupt:
        logger.info("Command interrupted by user")
        sys.exit(CLIDefaults.EXIT_INTERRUPTED)
    except SystemExit:
        raise
    except Exception as e:  # noqa: BLE001
        sys.exit(handle_cli_error(e, "partmerge-main", json_output=_json_mode()))


if __name__ == "__main__":
    main()
