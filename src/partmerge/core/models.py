"""Data models for merge planning and execution.

This module defines the groups discovered in a directory, the plan built
from them and the per-group outcome of running the concatenation tool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


def output_path_for(key: str, output_directory: Path, extension: str) -> Path:
    """Return the merged file path for a group key."""
    return output_directory / f"{key}.{extension}"


@dataclass
class MergeGroup:
    """Parts sharing a group key, in concatenation order.

    Attributes:
        key: Group key derived from the filenames.
             Example: "DJI_1234"
        files: Member filenames (no directory), already sorted.
        output_path: Where the merged file is written.

    Example:
        >>> group = MergeGroup(
        ...     key="DJI_1234",
        ...     files=["DJI_1234_001.mp4", "DJI_1234_002.mp4"],
        ...     output_path=Path("out/DJI_1234.mp4"),
        ... )
        >>> group.size
        2
    """

    key: str
    files: list[str]
    output_path: Path

    @property
    def size(self) -> int:
        """Number of parts in the group."""
        return len(self.files)

    def to_dict(self) -> dict[str, object]:
        """Convert group to dictionary for JSON output."""
        return {
            "key": self.key,
            "files": list(self.files),
            "output_path": str(self.output_path),
        }


@dataclass
class MergePlan:
    """Every group that will be merged in one run.

    Attributes:
        source_directory: Directory the parts were found in.
        output_directory: Directory merged files are written to.
        groups: Groups in first-seen key order.
        candidates: Number of files that passed the global matcher.
    """

    source_directory: Path
    output_directory: Path
    groups: list[MergeGroup] = field(default_factory=list)
    candidates: int = 0

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to merge."""
        return not self.groups

    def to_dict(self) -> dict[str, object]:
        """Convert plan to dictionary for JSON output."""
        return {
            "source_directory": str(self.source_directory),
            "output_directory": str(self.output_directory),
            "candidates": self.candidates,
            "groups": [group.to_dict() for group in self.groups],
        }


@dataclass
class MergeResult:
    """Outcome of concatenating one group.

    Attributes:
        group: The group that was processed.
        return_code: Exit status of the tool, None if it never started.
        output: Combined stdout/stderr of the tool.
        error: Failure reason when the tool could not be run.
    """

    group: MergeGroup
    return_code: int | None
    output: str = ""
    error: str | None = None

    @property
    def success(self) -> bool:
        """True only when the tool ran and exited with status 0."""
        return self.error is None and self.return_code == 0

    def to_dict(self) -> dict[str, object]:
        """Convert result to dictionary for JSON output."""
        return {
            **self.group.to_dict(),
            "success": self.success,
            "return_code": self.return_code,
            "error": self.error,
            "tool_output": self.output,
        }


class RunStatus(str, Enum):
    """Terminal state of a merge run."""

    NO_GROUPS = "no_groups"
    DRY_RUN = "dry_run"
    ABORTED = "aborted"
    DONE = "done"


@dataclass
class RunOutcome:
    """What a merge run ended with."""

    status: RunStatus
    plan: MergePlan
    results: list[MergeResult] = field(default_factory=list)

    @property
    def failed(self) -> list[MergeResult]:
        """Results whose group did not merge."""
        return [result for result in self.results if not result.success]

    @property
    def succeeded(self) -> list[MergeResult]:
        """Results whose group merged."""
        return [result for result in self.results if result.success]

    def to_dict(self) -> dict[str, object]:
        """Convert outcome to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "plan": self.plan.to_dict(),
            "results": [result.to_dict() for result in self.results],
            "summary": {
                "groups": len(self.plan),
                "succeeded": len(self.succeeded),
                "failed": len(self.failed),
            },
        }
