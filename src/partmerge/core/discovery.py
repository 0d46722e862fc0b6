"""Candidate discovery.

Lists one directory (never recursing) and keeps the regular files whose
name matches the global matcher.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from partmerge.core.patterns import compile_pattern
from partmerge.shared.errors import create_directory_error

logger = logging.getLogger(__name__)


def discover_candidates(
    directory: str | Path,
    global_pattern: str | re.Pattern[str],
) -> list[str]:
    """Return matching regular-file names directly inside ``directory``.

    Matching is case-insensitive. Directories and special files are skipped;
    a symlink counts when it points to a regular file.

    Args:
        directory: Directory to list. Trailing separators are ignored.
        global_pattern: Inclusion pattern searched in each name.

    Returns:
        Sorted list of filenames (no directory part)

    Raises:
        FilesystemError: If the directory is missing, not a directory or
                         cannot be read
        PatternError: If ``global_pattern`` does not compile
    """
    matcher = compile_pattern(global_pattern, "global-matcher", re.IGNORECASE)
    directory = Path(directory)

    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                if matcher.search(entry.name):
                    names.append(entry.name)
                else:
                    logger.debug("Skipping %s: no global match", entry.name)
    except OSError as e:
        raise create_directory_error(directory, "discover_candidates", e) from e

    names.sort()
    logger.info("Found %d candidate files in %s", len(names), directory)
    return names
