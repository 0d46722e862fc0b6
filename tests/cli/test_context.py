"""
Test CLI context management system.

This test ensures that the context management system works correctly
with ContextVar and provides proper type safety.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from partmerge.cli.common.context import (
    CliContext,
    LogLevel,
    clear_cli_context,
    get_cli_context,
    set_cli_context,
)
from partmerge.cli.typer_app import app


def test_cli_context_defaults() -> None:
    """Test that CliContext defaults to quiet console output."""
    context = CliContext()

    assert context.verbose == 0
    assert context.log_level == LogLevel.WARNING
    assert context.json_output is False


def test_cli_context_validation() -> None:
    """Test that CliContext validates input values."""
    with pytest.raises(ValidationError):
        CliContext(verbose=-1)

    with pytest.raises(ValidationError):
        CliContext(log_level="INVALID")


def test_verbose_forces_debug() -> None:
    """Test that verbose mode overrides the log level."""
    context = CliContext(verbose=2, log_level=LogLevel.ERROR)

    assert context.is_verbose()
    assert context.get_effective_log_level() == "DEBUG"


def test_log_level_without_verbose() -> None:
    context = CliContext(log_level=LogLevel.INFO)

    assert not context.is_verbose()
    assert context.get_effective_log_level() == "INFO"


def test_context_lifecycle() -> None:
    """Test set, get and clear of the context variable."""
    clear_cli_context()
    with pytest.raises(RuntimeError):
        get_cli_context()

    context = CliContext(json_output=True)
    set_cli_context(context)
    assert get_cli_context() is context

    clear_cli_context()
    with pytest.raises(RuntimeError):
        get_cli_context()


def test_command_sets_context(tmp_path: Path) -> None:
    """Running the command leaves its context behind for the handlers."""
    result = CliRunner().invoke(app, ["-d", str(tmp_path), "--log-level", "info"])

    assert result.exit_code == 0
    context = get_cli_context()
    assert context.log_level == LogLevel.INFO
    assert context.verbose == 0
