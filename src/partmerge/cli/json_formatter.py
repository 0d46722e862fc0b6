"""
JSON result documents for ``--json``.

Every document has the same envelope (``success``, ``timestamp``,
``command``, ``data``, ``errors``, ``warnings``) so scripts can check
``success`` before looking at the command-specific ``data``.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Any

import orjson

JSON_OPTIONS = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2


def _default(value: Any) -> Any:
    """Encode values orjson does not know natively."""
    if isinstance(value, PurePath):
        return str(value)
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def _envelope(
    command: str,
    *,
    success: bool,
    data: Any,
    errors: list[str],
    warnings: list[str],
) -> dict[str, Any]:
    return {
        "success": success,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "data": data,
        "errors": errors,
        "warnings": warnings,
    }


def format_json_output(
    success: bool,
    command: str,
    data: Any | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> bytes:
    """Encode a command result document.

    A document that carries errors is never reported as successful. If
    ``data`` cannot be encoded, a failure document describing the encoding
    error is returned instead.

    Args:
        success: Whether the command succeeded
        command: Command name
        data: Command-specific payload; paths are written as strings
        errors: Error messages
        warnings: Warning messages

    Returns:
        Indented JSON with sorted keys
    """
    errors = list(errors or [])
    document = _envelope(
        command,
        success=success and not errors,
        data=data,
        errors=errors,
        warnings=list(warnings or []),
    )

    try:
        return orjson.dumps(document, default=_default, option=JSON_OPTIONS)
    except orjson.JSONEncodeError as e:
        fallback = _envelope(
            command,
            success=False,
            data=None,
            errors=[f"JSON serialization failed: {e}"],
            warnings=[],
        )
        return orjson.dumps(fallback, option=JSON_OPTIONS)


def write_json_output(payload: bytes) -> None:
    """Write a JSON document to stdout followed by a newline."""
    sys.stdout.buffer.write(payload + b"\n")
    sys.stdout.buffer.flush()
