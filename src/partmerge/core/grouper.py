"""Group candidate files by a key taken from their names.

The key comes from the first match of the grouping pattern:
- the ``key`` named group when the pattern defines one,
- otherwise the whole match minus its last character (the separator that
  ends the prefix, e.g. ``DJI_1234_`` -> ``DJI_1234``).

Files with no match or an empty key are left out without error. Groups
with a single member are dropped.
"""

from __future__ import annotations

import logging
import re

from partmerge.core.patterns import compile_pattern
from partmerge.shared.constants import MatcherDefaults

logger = logging.getLogger(__name__)

MIN_GROUP_SIZE = 2

_DIGITS = re.compile(r"([0-9]+)")


def natural_sort_key(name: str) -> list[int | str]:
    """Sorts strings containing numbers in human order (1, 2, 10 instead of 1, 10, 2)."""
    return [int(text) if text.isdigit() else text.lower() for text in _DIGITS.split(name)]


def derive_group_key(filename: str, pattern: re.Pattern[str]) -> str | None:
    """Return the group key for ``filename``, or None if it has none."""
    match = pattern.search(filename)
    if match is None:
        return None

    if MatcherDefaults.KEY_GROUP_NAME in pattern.groupindex:
        key = match.group(MatcherDefaults.KEY_GROUP_NAME) or ""
    else:
        key = match.group(0)[:-1]

    return key or None


def build_groups(
    candidates: list[str],
    grouping_pattern: str | re.Pattern[str],
    *,
    natural_sort: bool = False,
) -> dict[str, list[str]]:
    """Group filenames by derived key.

    Args:
        candidates: Filenames to group
        grouping_pattern: Pattern producing the key (case-sensitive)
        natural_sort: Order members by embedded numbers instead of plain
                      string comparison

    Returns:
        Mapping of key to sorted members, in first-seen key order, holding
        only groups with at least two members

    Raises:
        PatternError: If ``grouping_pattern`` does not compile
    """
    matcher = compile_pattern(grouping_pattern, "grouping-matcher")

    groups: dict[str, list[str]] = {}
    for filename in candidates:
        key = derive_group_key(filename, matcher)
        if key is None:
            logger.debug("Skipping %s: no group key", filename)
            continue
        groups.setdefault(key, []).append(filename)

    result: dict[str, list[str]] = {}
    for key, members in groups.items():
        if len(members) < MIN_GROUP_SIZE:
            logger.debug("Dropping single-file group %s", key)
            continue
        if natural_sort:
            members.sort(key=lambda name: (natural_sort_key(name), name))
        else:
            # Plain string order: part_10 sorts before part_9
            members.sort()
        result[key] = members

    logger.info("Built %d groups from %d candidates", len(result), len(candidates))
    return result
