"""Core merge pipeline for partmerge.

Discovery, grouping, planning and ffmpeg execution.
"""

from partmerge.core.concat import ConcatRunner
from partmerge.core.discovery import discover_candidates
from partmerge.core.grouper import build_groups, derive_group_key, natural_sort_key
from partmerge.core.merger import GroupingMerger
from partmerge.core.models import (
    MergeGroup,
    MergePlan,
    MergeResult,
    RunOutcome,
    RunStatus,
    output_path_for,
)

__all__ = [
    "ConcatRunner",
    "GroupingMerger",
    "MergeGroup",
    "MergePlan",
    "MergeResult",
    "RunOutcome",
    "RunStatus",
    "build_groups",
    "derive_group_key",
    "discover_candidates",
    "natural_sort_key",
    "output_path_for",
]
