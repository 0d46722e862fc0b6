"""partmerge error types.

Failures are raised as ``PartMergeError`` subclasses carrying an
``ErrorCode``, a user-facing message, an ``ErrorContext`` and the original
exception, and are turned into exit codes only at the CLI boundary.

Layers:
- ``InfrastructureError``: the filesystem or the ffmpeg process let us down
- ``ApplicationError``: bad configuration, patterns or option combinations
- ``CliError``: the final form handed to the user, with an exit code
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Context values must stay loggable and JSON-serializable
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for partmerge."""

    # Filesystem
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"
    NOT_A_DIRECTORY = "NOT_A_DIRECTORY"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    FILE_ACCESS_ERROR = "FILE_ACCESS_ERROR"

    # Configuration
    CONFIG_ERROR = "CONFIG_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PATTERN = "INVALID_PATTERN"

    # ffmpeg
    EXTERNAL_TOOL_MISSING = "EXTERNAL_TOOL_MISSING"

    # CLI
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"


def _to_primitive(key: str, value: Any) -> PrimitiveContextValue:
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    raise TypeError(
        f"Context value {key!r} has type {type(value).__name__}; "
        "only str, int, float, bool, Path and Enum are allowed",
    )


@dataclass(frozen=True)
class ErrorContext:
    """Where an error happened.

    Attributes:
        file_path: File or directory involved
        operation: Name of the failing operation
        additional_data: Extra primitive values; Path and Enum values are
                         converted on construction
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is None:
            return
        if not isinstance(self.additional_data, dict):
            raise TypeError(
                f"additional_data must be dict, got {type(self.additional_data).__name__}",
            )
        coerced = {key: _to_primitive(key, value) for key, value in self.additional_data.items()}
        object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Context as a dict with only the fields that are set."""
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = dict(self.additional_data or {})
        return data


class PartMergeError(Exception):
    """Base class of all partmerge errors.

    Args:
        code: Error code
        message: Message shown to the user
        context: Where the error happened
        original_error: Exception being translated, if any
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Error as a dict for logs and JSON output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class InfrastructureError(PartMergeError):
    """The filesystem or the external tool failed."""


class ApplicationError(PartMergeError):
    """Invalid configuration or option combination."""


class FilesystemError(InfrastructureError):
    """Source or output directory is missing, not a directory, or unusable."""


class PatternError(ApplicationError):
    """A global or grouping matcher is not a valid regular expression."""


class ExternalToolError(InfrastructureError):
    """The concatenation tool could not be started."""


class CliError(ApplicationError):
    """Error as reported by the CLI, with the process exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


def create_directory_error(
    directory: str | Path,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> FilesystemError:
    """Explain why ``directory`` cannot be used."""
    path = Path(directory)
    context = ErrorContext(file_path=str(path), operation=operation)

    if isinstance(original_error, PermissionError):
        code, message = ErrorCode.PERMISSION_DENIED, f"Permission denied: {path}"
    elif not path.exists():
        code, message = ErrorCode.DIRECTORY_NOT_FOUND, f"Directory does not exist: {path}"
    elif not path.is_dir():
        code, message = ErrorCode.NOT_A_DIRECTORY, f"Path is not a directory: {path}"
    else:
        code, message = ErrorCode.FILE_ACCESS_ERROR, f"Cannot access directory: {path}"

    return FilesystemError(code, message, context, original_error)


def create_pattern_error(
    pattern: str,
    option: str,
    original_error: Exception | None = None,
) -> PatternError:
    """PatternError for a matcher that does not compile."""
    reason = f": {original_error}" if original_error else ""
    return PatternError(
        ErrorCode.INVALID_PATTERN,
        f"Invalid {option} pattern {pattern!r}{reason}",
        ErrorContext(
            operation="compile_pattern",
            additional_data={"option": option, "pattern": pattern},
        ),
        original_error,
    )


def create_tool_missing_error(
    binary: str,
    original_error: Exception | None = None,
) -> ExternalToolError:
    """ExternalToolError for a binary that cannot be executed."""
    return ExternalToolError(
        ErrorCode.EXTERNAL_TOOL_MISSING,
        f"Cannot run concatenation tool '{binary}'. Is it installed and on PATH?",
        ErrorContext(operation="run_concat", additional_data={"binary": binary}),
        original_error,
    )


def create_cli_error(
    message: str,
    command: str | None = None,
    original_error: Exception | None = None,
    exit_code: int = 1,
) -> CliError:
    """CliError for ``command`` with the given exit code."""
    return CliError(
        ErrorCode.CLI_UNEXPECTED_ERROR,
        message,
        ErrorContext(
            operation="cli",
            additional_data={"command": command} if command else None,
        ),
        original_error,
        command,
        exit_code,
    )
