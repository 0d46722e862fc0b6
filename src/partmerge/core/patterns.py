"""Regular expression helpers shared by discovery and grouping."""

from __future__ import annotations

import re

from partmerge.shared.errors import create_pattern_error


def compile_pattern(
    pattern: str | re.Pattern[str],
    option: str,
    flags: int = 0,
) -> re.Pattern[str]:
    """Compile a user-supplied pattern.

    Already compiled patterns are recompiled when ``flags`` adds something
    they do not carry.

    Args:
        pattern: Pattern text or compiled pattern
        option: Option name used in the error message
        flags: re flags to apply

    Returns:
        Compiled pattern

    Raises:
        PatternError: If the pattern does not compile
    """
    if isinstance(pattern, re.Pattern):
        if pattern.flags & flags == flags:
            return pattern
        flags |= pattern.flags
        pattern = pattern.pattern

    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise create_pattern_error(pattern, option, e) from e
