"""GroupingMerger: the single merge pipeline.

Runs discovery, grouping and planning, then gates execution behind a
confirmation callback. Groups are merged one after another; a failing
group is recorded and the next one still runs.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from partmerge.config.settings import MergeSettings
from partmerge.core.concat import ConcatRunner
from partmerge.core.discovery import discover_candidates
from partmerge.core.grouper import build_groups
from partmerge.core.models import (
    MergeGroup,
    MergePlan,
    MergeResult,
    RunOutcome,
    RunStatus,
    output_path_for,
)
from partmerge.core.patterns import compile_pattern
from partmerge.shared.errors import ExternalToolError, create_directory_error

logger = logging.getLogger(__name__)

PlanCallback = Callable[[MergePlan], None]
ConfirmCallback = Callable[[MergePlan], bool]
GroupCallback = Callable[[int, int, MergeGroup], None]
ResultCallback = Callable[[MergeResult], None]


class GroupingMerger:
    """Plans and performs merges for one configuration.

    Both matchers are compiled on construction, so a malformed pattern
    fails before anything touches the filesystem.

    Args:
        settings: Frozen run configuration
        runner: Concatenation runner, built from ``settings`` if omitted

    Raises:
        PatternError: If either matcher does not compile
    """

    def __init__(self, settings: MergeSettings, runner: ConcatRunner | None = None) -> None:
        self.settings = settings
        self.global_pattern = compile_pattern(
            settings.global_matcher,
            "global-matcher",
            re.IGNORECASE,
        )
        self.grouping_pattern = compile_pattern(settings.grouping_matcher, "grouping-matcher")
        self.runner = runner or ConcatRunner(
            settings.ffmpeg_binary,
            overwrite=settings.overwrite,
        )

    def build_plan(self) -> MergePlan:
        """Discover candidates and turn their groups into a plan.

        Raises:
            FilesystemError: If the source directory cannot be listed
        """
        source = self.settings.source_directory
        # Absolute so output names starting with "-" never read as ffmpeg options
        target = self.settings.target_directory.absolute()

        candidates = discover_candidates(source, self.global_pattern)
        groups = build_groups(
            candidates,
            self.grouping_pattern,
            natural_sort=self.settings.natural_sort,
        )

        return MergePlan(
            source_directory=source,
            output_directory=target,
            groups=[
                MergeGroup(
                    key=key,
                    files=files,
                    output_path=output_path_for(key, target, self.settings.output_extension),
                )
                for key, files in groups.items()
            ],
            candidates=len(candidates),
        )

    def execute_group(self, group: MergeGroup) -> MergeResult:
        """Merge one group, turning a tool that cannot start into a failed result."""
        try:
            return self.runner.execute_group(group, self.settings.source_directory)
        except ExternalToolError as e:
            logger.error("Group %s failed: %s", group.key, e.message)
            return MergeResult(group=group, return_code=None, error=e.message)

    def execute(
        self,
        plan: MergePlan,
        *,
        on_start: GroupCallback | None = None,
        on_result: ResultCallback | None = None,
    ) -> list[MergeResult]:
        """Merge every group of ``plan`` sequentially.

        Raises:
            FilesystemError: If the output directory cannot be created
        """
        try:
            plan.output_directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise create_directory_error(plan.output_directory, "prepare_output", e) from e

        results: list[MergeResult] = []
        for ordinal, group in enumerate(plan.groups, start=1):
            if on_start is not None:
                on_start(ordinal, len(plan), group)
            result = self.execute_group(group)
            results.append(result)
            if on_result is not None:
                on_result(result)

        logger.info(
            "Merged %d of %d groups",
            sum(1 for result in results if result.success),
            len(results),
        )
        return results

    def run(
        self,
        *,
        present: PlanCallback,
        confirm: ConfirmCallback,
        dry_run: bool = False,
        on_start: GroupCallback | None = None,
        on_result: ResultCallback | None = None,
    ) -> RunOutcome:
        """Plan, present, confirm and execute.

        Args:
            present: Shows the plan to the user
            confirm: Returns True to proceed; anything else aborts the run
            dry_run: Stop after presenting the plan
            on_start: Called before each group is merged
            on_result: Called with each group's result

        Returns:
            RunOutcome with the terminal status and any results
        """
        plan = self.build_plan()
        if plan.is_empty:
            logger.info("No groups found in %s", plan.source_directory)
            return RunOutcome(status=RunStatus.NO_GROUPS, plan=plan)

        present(plan)

        if dry_run:
            return RunOutcome(status=RunStatus.DRY_RUN, plan=plan)

        if not confirm(plan):
            logger.info("Merge declined by user")
            return RunOutcome(status=RunStatus.ABORTED, plan=plan)

        results = self.execute(plan, on_start=on_start, on_result=on_result)
        return RunOutcome(status=RunStatus.DONE, plan=plan, results=results)
