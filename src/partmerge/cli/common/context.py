"""
CLI context.

Presentation state of the running command (verbosity, log level, JSON
mode) kept in a ContextVar so handlers and helpers can read it without
threading flags through every call. The merge configuration itself is not
stored here; it travels as an explicit ``MergeSettings`` object.
"""

from __future__ import annotations

import contextvars
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    """Accepted ``--log-level`` values."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """Output flags of one command invocation.

    Attributes:
        verbose: Number of ``-v`` flags given
        log_level: Level requested with ``--log-level``
        json_output: Whether results are written as a JSON document
    """

    model_config = ConfigDict(frozen=True)

    verbose: int = Field(default=0, ge=0)
    log_level: LogLevel = LogLevel.WARNING
    json_output: bool = False

    def is_verbose(self) -> bool:
        return self.verbose > 0

    def get_effective_log_level(self) -> str:
        """Level for the console handler; any ``-v`` means DEBUG."""
        if self.is_verbose():
            return LogLevel.DEBUG.value
        return self.log_level.value


_cli_context: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "partmerge_cli_context",
    default=None,
)


def get_cli_context() -> CliContext:
    """Return the context of the running command.

    Raises:
        RuntimeError: If no command has set a context
    """
    context = _cli_context.get()
    if context is None:
        raise RuntimeError("CLI context is not set; it is created when the merge command starts.")
    return context


def set_cli_context(context: CliContext) -> None:
    _cli_context.set(context)


def clear_cli_context() -> None:
    _cli_context.set(None)
