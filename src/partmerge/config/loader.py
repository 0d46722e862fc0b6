"""Settings loader.

This module handles:
- Configuration file discovery and TOML loading
- Merging CLI overrides on top of file and environment values
- Translating validation failures into partmerge errors
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from partmerge.config.settings import MergeSettings
from partmerge.shared.errors import (
    ApplicationError,
    ErrorCode,
    ErrorContext,
    create_pattern_error,
)

logger = logging.getLogger(__name__)

HOME_DIR = ".partmerge"
CONFIG_FILENAME = "partmerge.toml"

PATTERN_FIELDS = ("global_matcher", "grouping_matcher")


def default_config_paths() -> list[Path]:
    """Candidate configuration files, in lookup order."""
    return [
        Path(CONFIG_FILENAME),
        Path.home() / HOME_DIR / "config.toml",
    ]


def load_settings(
    config_path: str | Path | None = None,
    **overrides: object,
) -> MergeSettings:
    """Load settings from TOML configuration file or environment.

    Args:
        config_path: Optional path to a TOML file. If None, the default
                     locations are tried before falling back to environment
                     variables and defaults.
        **overrides: Values from the command line. ``None`` means "not given".

    Returns:
        Frozen MergeSettings instance

    Raises:
        PatternError: If a matcher is not a valid regular expression
        ApplicationError: If the file is missing, unreadable or invalid
    """
    given = {key: value for key, value in overrides.items() if value is not None}

    if config_path is None:
        config_path = next((p for p in default_config_paths() if p.exists()), None)

    try:
        if config_path is not None:
            return MergeSettings.from_toml_file(config_path, **given)
        return MergeSettings(**given)
    except ValidationError as e:
        raise _translate_validation_error(e, given) from e
    except FileNotFoundError as e:
        raise ApplicationError(
            ErrorCode.CONFIG_ERROR,
            str(e),
            ErrorContext(operation="load_settings", file_path=str(config_path)),
            e,
        ) from e
    except (OSError, ValueError) as e:
        # toml.TomlDecodeError is a ValueError
        raise ApplicationError(
            ErrorCode.CONFIG_ERROR,
            f"Cannot read configuration file {config_path}: {e}",
            ErrorContext(operation="load_settings", file_path=str(config_path)),
            e,
        ) from e


def _translate_validation_error(
    error: ValidationError,
    given: dict[str, object],
) -> ApplicationError:
    """Map the first pydantic error to a PatternError or ApplicationError."""
    first = error.errors()[0]
    field = str(first["loc"][0]) if first.get("loc") else "settings"

    if field in PATTERN_FIELDS:
        pattern = first.get("input", given.get(field, ""))
        cause = first.get("ctx", {}).get("error")
        return create_pattern_error(
            str(pattern),
            field.replace("_", "-"),
            cause if isinstance(cause, Exception) else error,
        )

    return ApplicationError(
        ErrorCode.CONFIG_ERROR,
        f"Invalid value for {field}: {first.get('msg', error)}",
        ErrorContext(operation="load_settings", additional_data={"field": field}),
        error,
    )


__all__ = ["default_config_paths", "load_settings"]
