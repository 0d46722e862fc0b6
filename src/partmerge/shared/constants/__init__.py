"""
Shared Constants Package

Centralized constants for partmerge. Import from here rather than from
the individual modules.
"""

from .cli import CLIDefaults, CLIHelp, CLIMessages, CLIOptions
from .merge import ConcatDefaults, MatcherDefaults

__all__ = [
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "ConcatDefaults",
    "MatcherDefaults",
]
